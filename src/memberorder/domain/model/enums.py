"""Domain enumerations."""

from enum import Enum, auto


class Visibility(Enum):
    """Class member visibility by naming convention."""

    PUBLIC = auto()  # no underscore, or dunder
    PROTECTED = auto()  # _name
    PRIVATE = auto()  # __name


class MemberKind(Enum):
    """Syntactic kind of a class member."""

    FIELD = auto()
    CONSTRUCTOR = auto()
    GETTER = auto()
    SETTER = auto()
    METHOD = auto()


class Severity(Enum):
    """Rule violation severity."""

    ERROR = auto()  # check fails
    WARNING = auto()  # check fails, shown as warning
    INFO = auto()  # informational
    STYLE = auto()  # style suggestion (default for member-ordering)
