"""Domain exceptions: all public errors of boframe.

Hexagonal architecture: all exceptions visible to users defined in domain.
Application and infrastructure layers raise these, never their own public errors.

Taxonomy:
    Contract faults: programmer errors in the caller, always raised synchronously.
    AuthorizationError: raised only by rules configured to throw.
    RemoteActionError: wraps any failure of a remote action.

Rule-content failures are never exceptions: they are recorded as broken rules.
"""


class BoFrameError(Exception):
    """Base for all boframe error exceptions.

    Allows: except BoFrameError to catch all library errors.
    """


class ModelTransitionError(BoFrameError, RuntimeError):
    """Illegal lifecycle transition requested.

    Inherits RuntimeError for semantic correctness (invalid state).

    Attributes:
        model_name: Name of the model whose instance refused the transition.
        from_state: Current state name ("NULL" before the first transition).
        to_state: Requested state name.
    """

    def __init__(self, *, model_name: str, from_state: str, to_state: str) -> None:
        """Initialize with model name and both state names."""
        self.model_name = model_name
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(f"{model_name}: illegal state transition {from_state} -> {to_state}")


class ReadOnlyPropertyError(BoFrameError, AttributeError):
    """Attempt to write a read-only property.

    Inherits AttributeError: assignment through the property surface fails
    the same way a read-only Python attribute does.

    Attributes:
        model_name: Name of the model.
        property_name: Name of the read-only property.
    """

    def __init__(self, *, model_name: str, property_name: str) -> None:
        """Initialize with model and property names."""
        self.model_name = model_name
        self.property_name = property_name
        super().__init__(f"{model_name}.{property_name} is read-only")


class UnknownPropertyError(BoFrameError, AttributeError):
    """Property is not declared on the model.

    Attributes:
        model_name: Name of the model.
        property_name: Name that was looked up.
    """

    def __init__(self, *, model_name: str, property_name: str) -> None:
        """Initialize with model and property names."""
        self.model_name = model_name
        self.property_name = property_name
        super().__init__(f"{model_name} has no property '{property_name}'")


class RuleNotInitializedError(BoFrameError, RuntimeError):
    """Rule added to a rule manager before its initialize() ran.

    Attributes:
        rule_name: Name of the rule.
    """

    def __init__(self, rule_name: str) -> None:
        """Initialize with rule name."""
        self.rule_name = rule_name
        super().__init__(f"rule '{rule_name}' must be initialized before use")


class ModelDefinitionError(BoFrameError, ValueError):
    """Model declaration is inconsistent.

    Raised while a model is being defined: duplicate properties, rules for
    undeclared properties, rule manager misuse, shadowed attributes.

    Attributes:
        model_name: Name of the model being defined.
        reason: Error description.
    """

    def __init__(self, *, model_name: str, reason: str) -> None:
        """Initialize with model name and reason."""
        self.model_name = model_name
        self.reason = reason
        super().__init__(f"{model_name}: {reason}")


class CyclicDependencyError(ModelDefinitionError):
    """Affected-property graph of the validation rules contains a cycle.

    Attributes:
        properties: Names of the properties forming the cycle.
    """

    def __init__(self, *, model_name: str, properties: frozenset[str]) -> None:
        """Initialize with model name and cycle members."""
        self.properties = properties
        super().__init__(
            model_name=model_name,
            reason=f"cyclic affected properties: {', '.join(sorted(properties))}",
        )


class InvalidChildTypeError(BoFrameError, TypeError):
    """Child property refers to a model kind the parent cannot own.

    Inherits TypeError for semantic correctness (expected kind X, got Y).

    Attributes:
        model_name: Name of the parent model.
        property_name: Name of the child property.
        expected: Description of the allowed model kinds.
        got: Description of what was supplied.
    """

    def __init__(self, *, model_name: str, property_name: str, expected: str, got: str) -> None:
        """Initialize with parent, property, expected and actual kinds."""
        self.model_name = model_name
        self.property_name = property_name
        self.expected = expected
        self.got = got
        super().__init__(f"{model_name}.{property_name}: expected {expected}, got {got}")


class PortalNotConfiguredError(BoFrameError, RuntimeError):
    """Remote action attempted on a model without a portal.

    Attributes:
        model_name: Name of the model.
    """

    def __init__(self, model_name: str) -> None:
        """Initialize with model name."""
        self.model_name = model_name
        super().__init__(f"{model_name}: no portal configured for remote actions")


class AuthorizationError(BoFrameError, PermissionError):
    """Authorization rule failed with behavior THROW_ERROR.

    Aborts the action in progress. No broken rule is recorded.

    Attributes:
        rule_name: Name of the failing rule.
        rule_id: Authorization key (action, optionally suffixed with target).
        message: Rule message.
    """

    def __init__(self, *, rule_name: str, rule_id: str, message: str) -> None:
        """Initialize with rule identity and message."""
        self.rule_name = rule_name
        self.rule_id = rule_id
        self.message = message
        super().__init__(f"{rule_id}: {message}")


class RemoteActionError(BoFrameError):
    """Remote action failed.

    Wraps the original exception. Preserves original traceback via __cause__.

    Attributes:
        model_type: Kind of the model (e.g. "EditableRootObject").
        model_name: Name of the model.
        action: Remote action name (create, fetch, insert, ...).
        inner: Original exception.
    """

    def __init__(
        self,
        *,
        model_type: str,
        model_name: str,
        action: str,
        inner: BaseException,
    ) -> None:
        """Initialize with model identity, action and original exception."""
        self.model_type = model_type
        self.model_name = model_name
        self.action = action
        self.inner = inner
        super().__init__(
            f"{model_type} {model_name}: {action} failed: {type(inner).__name__}: {inner}"
        )
        self.__cause__ = inner
