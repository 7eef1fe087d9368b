"""Project-wide custom exception types.

Every error here is raised *before* any state changes, so the caller can show
a message and carry on with the snapshot it already holds.
"""


class SurveyError(ValueError):
    """Base class for recoverable survey errors."""


class DuplicateGroupError(SurveyError):
    """Raised when adding a group whose name already exists or is blank."""


class UnknownGroupError(SurveyError):
    """Raised when mutating a group that is not part of the survey."""


class IndexOutOfRangeError(SurveyError):
    """Raised when an item index falls outside the configured item count."""


class InvalidRatingValueError(SurveyError):
    """Raised when a rating is not an integer on the Likert scale."""


class GroupLimitError(SurveyError):
    """Raised when the configured maximum number of groups is reached."""


class StageTransitionError(SurveyError):
    """Base class for refused stage changes."""


class StageBlockedError(StageTransitionError):
    """Raised when the completion gate does not allow moving forward."""


class InvalidTransitionError(StageTransitionError):
    """Raised for transitions that do not exist (e.g. restart while rating)."""
