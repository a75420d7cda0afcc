from .outcome import Outcome


class CaseFrameError(Exception):
    """Base class for fatal case-frame errors. Each carries its Outcome."""
    outcome: Outcome = Outcome.BOOTSTRAP_FAILURE


class UninitializedConstraintCatalogError(CaseFrameError):
    """A standard relation constraint was read before the catalog was initialized."""
    outcome = Outcome.UNINITIALIZED_CATALOG


class BootstrapError(CaseFrameError):
    """The standard constraints or standard case frames could not be built."""
    outcome = Outcome.BOOTSTRAP_FAILURE
