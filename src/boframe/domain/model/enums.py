"""Domain enumerations.

Values are the wire names used in broken-rule output and remote requests.
"""

from enum import Enum


class RuleSeverity(Enum):
    """Severity of a rule result."""

    SUCCESS = "success"  # not recorded
    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"  # makes the instance invalid


class NoAccessBehavior(Enum):
    """Consequence of a failing authorization rule."""

    THROW_ERROR = "throwError"  # raise AuthorizationError
    SHOW_ERROR = "showError"
    SHOW_WARNING = "showWarning"
    SHOW_INFORMATION = "showInformation"

    @property
    def severity(self) -> RuleSeverity:
        """Severity of the broken rule recorded for this behavior."""
        return _BEHAVIOR_SEVERITY[self]


_BEHAVIOR_SEVERITY = {
    NoAccessBehavior.THROW_ERROR: RuleSeverity.ERROR,
    NoAccessBehavior.SHOW_ERROR: RuleSeverity.ERROR,
    NoAccessBehavior.SHOW_WARNING: RuleSeverity.WARNING,
    NoAccessBehavior.SHOW_INFORMATION: RuleSeverity.INFORMATION,
}


class AuthorizationAction(Enum):
    """Action guarded by authorization rules."""

    READ_PROPERTY = "readProperty"  # target: property
    WRITE_PROPERTY = "writeProperty"  # target: property
    CREATE_OBJECT = "createObject"
    FETCH_OBJECT = "fetchObject"
    UPDATE_OBJECT = "updateObject"
    REMOVE_OBJECT = "removeObject"
    EXECUTE_COMMAND = "executeCommand"
    EXECUTE_METHOD = "executeMethod"  # target: method name

    @property
    def targets_property(self) -> bool:
        """Check if the action is bound to a property."""
        return self in (AuthorizationAction.READ_PROPERTY, AuthorizationAction.WRITE_PROPERTY)

    @property
    def targets_method(self) -> bool:
        """Check if the action is bound to a method name."""
        return self is AuthorizationAction.EXECUTE_METHOD


class ModelState(Enum):
    """Lifecycle state of an editable model instance."""

    PRISTINE = "pristine"  # loaded, unchanged
    CREATED = "created"  # new, never saved
    CHANGED = "changed"  # loaded, then modified
    MARKED_FOR_REMOVAL = "markedForRemoval"  # deletion pending
    REMOVED = "removed"  # terminal


class ModelType(Enum):
    """Kind of a business object model."""

    EDITABLE_ROOT_OBJECT = "EditableRootObject"
    EDITABLE_CHILD_OBJECT = "EditableChildObject"
    EDITABLE_ROOT_COLLECTION = "EditableRootCollection"
    EDITABLE_CHILD_COLLECTION = "EditableChildCollection"
    READ_ONLY_ROOT_OBJECT = "ReadOnlyRootObject"
    READ_ONLY_CHILD_OBJECT = "ReadOnlyChildObject"
    READ_ONLY_ROOT_COLLECTION = "ReadOnlyRootCollection"
    READ_ONLY_CHILD_COLLECTION = "ReadOnlyChildCollection"
    COMMAND_OBJECT = "CommandObject"

    @property
    def is_collection(self) -> bool:
        """Check if the kind holds a list of child objects."""
        return self in (
            ModelType.EDITABLE_ROOT_COLLECTION,
            ModelType.EDITABLE_CHILD_COLLECTION,
            ModelType.READ_ONLY_ROOT_COLLECTION,
            ModelType.READ_ONLY_CHILD_COLLECTION,
        )

    @property
    def is_editable(self) -> bool:
        """Check if instances of the kind carry a lifecycle."""
        return self.value.startswith("Editable")


class RemoteAction(Enum):
    """Action sent to the remote portal."""

    CREATE = "create"
    FETCH = "fetch"
    INSERT = "insert"
    UPDATE = "update"
    REMOVE = "remove"
    EXECUTE = "execute"


class NullResultOption(Enum):
    """Outcome of an expression rule when the value is absent."""

    RETURN_TRUE = "returnTrue"
    RETURN_FALSE = "returnFalse"
    CONVERT_TO_EMPTY_STRING = "convertToEmptyString"
