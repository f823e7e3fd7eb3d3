"""
Errors raised while declaring the Minecraft EKS stack
"""


class DeploymentError(Exception):
    """Base class for declaration failures"""


class DefaultVpcNotFoundError(DeploymentError):
    """The account has no default VPC, or the lookup call failed"""


class KubeconfigRenderError(DeploymentError):
    """A cluster output had an unexpected shape while rendering the kubeconfig"""
