class DeploymentError(Exception):
    """Base class for failures that abort a deployment run."""

    hint = None


class ConnectivityError(DeploymentError):
    """Raised when the chain endpoint is unreachable or reports a malformed network."""

    hint = "Check the RPC endpoint of the selected network."


class TemplateResolutionError(DeploymentError):
    """Raised when a contract template is not found or not compiled."""

    hint = "Nothing was submitted; compile the project and try again."


class ConstructorArgumentsError(DeploymentError):
    """Raised when the constructor arguments cannot be built or do not match the ABI."""

    hint = "Nothing was submitted; check the constructor arguments."


class SubmissionError(DeploymentError):
    """Raised when the creation transaction is rejected before inclusion."""

    hint = "No contract was created."


class ConfirmationError(DeploymentError):
    """Raised when a submitted creation transaction is never confirmed."""

    hint = (
        "The creation transaction may still be pending; "
        "verify its status on chain before deploying again."
    )


class ContractNotConfirmed(RuntimeError):
    """Raised when an address is read from a deployment that has not been confirmed."""
