"""
EKS Module
Cluster and managed node group
"""

from .functions import create_eks_resources

__all__ = ["create_eks_resources"]
