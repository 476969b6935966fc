"""
Exceptions raised by the menu options engine.

Selection-count problems are never raised; they are reported as
``SelectionViolation`` data by the violation detector so that every problem
can be shown to the customer at once.
"""


class OptionsEngineError(Exception):
    """Base class for all errors raised by the engine."""


class NotFoundError(OptionsEngineError):
    """A product, option group or option id does not exist in the loaded data."""

    def __init__(self, kind: str, identifier: str, parent: str = None):
        self.kind = kind
        self.identifier = identifier
        self.parent = parent
        message = f"{kind} '{identifier}' not found"
        if parent:
            message += f" in {parent}"
        super().__init__(message)


class DataUnavailableError(OptionsEngineError):
    """The data store could not provide the requested catalog."""


class OptionUnavailableError(OptionsEngineError):
    """The option exists but is currently marked unavailable."""

    def __init__(self, group_id: str, option_id: str):
        self.group_id = group_id
        self.option_id = option_id
        super().__init__(f"option '{option_id}' in group '{group_id}' is unavailable")


class GroupCapReachedError(OptionsEngineError):
    """Raised under the "reject" cap policy when a group is already full."""

    def __init__(self, group_id: str, group_name: str, max_selections: int):
        self.group_id = group_id
        self.group_name = group_name
        self.max_selections = max_selections
        super().__init__(
            f"'{group_name}' allows at most {max_selections} selection(s)"
        )
