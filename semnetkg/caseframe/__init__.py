"""
Case frames for semantic networks: canonical ids, relation constraints and
prioritized signatures, plus the catalog of standard frames.
"""
from .model.relation import Relation
from .model.constraint import RelationConstraint
from .model.signature import CaseFrameSignature
from .model.case_frame import CaseFrame, ConstrainedCaseFrame, canonical_id
from .model.outcome import Outcome, SignatureResult
from .model.errors import CaseFrameError, UninitializedConstraintCatalogError, BootstrapError
from .engine.constraint_catalog import ConstraintCatalog
from .engine.frame_registry import FrameRegistry, InMemoryFrameRegistry
from .engine.catalog import StandardFrames, build_standard_frames
from .engine.context import CaseFrameContext

__all__ = [
    'Relation', 'RelationConstraint', 'CaseFrameSignature',
    'CaseFrame', 'ConstrainedCaseFrame', 'canonical_id',
    'Outcome', 'SignatureResult',
    'CaseFrameError', 'UninitializedConstraintCatalogError', 'BootstrapError',
    'ConstraintCatalog', 'FrameRegistry', 'InMemoryFrameRegistry',
    'StandardFrames', 'build_standard_frames', 'CaseFrameContext',
]
