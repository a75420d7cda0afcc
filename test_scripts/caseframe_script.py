#!/usr/bin/env python
"""
Script to demonstrate bootstrapping the standard case frames and managing
the signatures of one frame.
"""
import os
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

from semnetkg.caseframe.engine.context import CaseFrameContext
from semnetkg.caseframe.model.signature import CaseFrameSignature

def main():
    """
    Bootstrap the standard frames twice, then reorder the signatures
    of the and-entailment frame.
    """
    # Set up logging
    logging.basicConfig(level=logging.INFO,
                        format='[%(levelname)s] %(message)s')
    logger = logging.getLogger(__name__)

    # Step 1: Load config file
    config_file = os.path.join(project_root, "config", "caseframes.yaml")
    if os.path.exists(config_file):
        logger.info(f"Loading configuration from {config_file}")
        ctx = CaseFrameContext.from_config_file(config_file)
    else:
        logger.warning(f"Config file {config_file} not found, using defaults")
        ctx = CaseFrameContext()

    # Step 2: Bootstrap, twice, to show the registry hands back the same frames
    frames = ctx.bootstrap()
    again = ctx.bootstrap()
    logger.info(f"Registry holds {len(ctx.registry)} frames")
    for name, frame in frames.by_name().items():
        same = frame is again.by_name()[name]
        logger.info(f"  {name:<16} {frame.semantic_class:<14} {frame.id}  (same instance: {same})")

    # Step 3: Signatures, most specific first
    and_rule = frames.and_rule
    for sig_id, priority in (("and-general", None), ("and-binary", 0), ("and-unary", 0)):
        result = and_rule.add_signature(CaseFrameSignature(sig_id, result="Proposition"), priority)
        logger.info(f"add {sig_id} at {priority}: {result}")

    logger.info(f"Duplicate add: {and_rule.add_signature(CaseFrameSignature('and-binary'))}")
    logger.info(f"Signature order: {list(and_rule.signature_order)}")
    logger.info(f"Remove and-unary: {and_rule.remove_signature('and-unary')}")
    logger.info(f"Remove missing: {and_rule.remove_signature('and-unknown')}")
    logger.info(f"Signature order: {list(and_rule.signature_order)}")

if __name__ == "__main__":
    main()
