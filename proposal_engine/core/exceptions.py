"""Exception types raised by the proposal engine."""


class ProposalEngineError(Exception):
    """Base class for engine errors."""


class SnapshotError(ProposalEngineError, ValueError):
    """A persisted snapshot could not be decoded into store state."""
