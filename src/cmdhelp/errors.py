"""Custom exception hierarchy for cmdhelp."""


class CmdHelpError(Exception):
    """Base exception for cmdhelp failures."""


class InvalidWrapWidthError(ValueError, CmdHelpError):
    """Raised when text is wrapped to a width smaller than one column."""

    def __init__(self, width: int) -> None:
        super().__init__(f"Wrap width must be at least 1, got {width}.")
        self.width = width


class InvalidValueSetSourceError(TypeError, CmdHelpError):
    """Raised when a value-set source neither enumerates nor validates values."""


class ValueSetSourceNotConstructibleError(TypeError, CmdHelpError):
    """Raised when a value-set source type cannot be built without arguments."""

    def __init__(self, source_type: type) -> None:
        super().__init__(
            f"Value-set source {source_type.__name__} cannot be instantiated without arguments."
        )
        self.source_type = source_type


class InvalidSpecificationError(ValueError, CmdHelpError):
    """Option/value specification invariants violated."""


class MissingCollaboratorError(CmdHelpError):
    """A parser metadata callback needed for rendering was not supplied."""

    def __init__(self, collaborator: str) -> None:
        super().__init__(f"No '{collaborator}' callback configured in parser metadata.")
        self.collaborator = collaborator


class ExpectedNotParsedResultError(ValueError, CmdHelpError):
    """Raised when automatic help is requested for a successful parse."""

    def __init__(self) -> None:
        super().__init__("Expecting a NotParsed result.")
