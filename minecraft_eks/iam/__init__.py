"""
IAM Module for EKS
Cluster and node group roles with their managed policy attachments
"""

from .functions import create_iam_resources

__all__ = ["create_iam_resources"]
