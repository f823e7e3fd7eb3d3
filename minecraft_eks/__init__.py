"""
Pulumi modules for the Minecraft EKS deployment
Function-based modules, one per concern
"""

from .vpc import create_vpc_resources
from .iam import create_iam_resources
from .eks import create_eks_resources
from .kubeconfig import create_kubeconfig
from .addons import create_addons_resources

__all__ = [
    "create_vpc_resources",
    "create_iam_resources",
    "create_eks_resources",
    "create_kubeconfig",
    "create_addons_resources"
]
