"""
IAM Module Functions
Creates IAM roles and policy attachments for the EKS cluster and node group
"""

import json
import pulumi
import pulumi_aws as aws
from typing import Dict, List, Tuple

CLUSTER_POLICY_ARN = "arn:aws:iam::aws:policy/AmazonEKSClusterPolicy"

NODE_POLICIES: List[Tuple[str, str]] = [
    ("node-iam-role-attachment", "arn:aws:iam::aws:policy/AmazonEKSWorkerNodePolicy"),
    ("node-iam-role-attachment2", "arn:aws:iam::aws:policy/AmazonEKS_CNI_Policy"),
    ("node-iam-role-attachment3", "arn:aws:iam::aws:policy/AmazonEC2ContainerRegistryReadOnly"),
]


def assume_role_policy(service: str) -> str:
    """Trust policy letting a single AWS service assume the role"""
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [{
            "Effect": "Allow",
            "Principal": {"Service": service},
            "Action": "sts:AssumeRole"
        }]
    })


def create_cluster_role(attach_cluster_policy: bool = False, tags: Dict[str, str] = None) -> Dict[str, any]:
    """
    Create IAM role for the EKS control plane

    No managed policy is attached unless attach_cluster_policy is set.
    Without AmazonEKSClusterPolicy the control plane cannot manage
    cluster resources.

    Args:
        attach_cluster_policy: Attach AmazonEKSClusterPolicy to the role
        tags: Additional tags

    Returns:
        Dict with role resource and outputs
    """
    tags = tags or {}

    role = aws.iam.Role(
        "eks-iam-role",
        assume_role_policy=assume_role_policy("eks.amazonaws.com"),
        tags={
            **tags,
            "Module": "iam"
        }
    )

    policy_attachments = {}
    if attach_cluster_policy:
        policy_attachments["cluster_policy"] = aws.iam.RolePolicyAttachment(
            "eks-iam-role-attachment",
            policy_arn=CLUSTER_POLICY_ARN,
            role=role.name
        )
    else:
        pulumi.log.warn(
            "Cluster role has no policy attachments; AmazonEKSClusterPolicy is not attached. "
            "Set attachClusterPolicy to attach it."
        )

    return {
        "role": role,
        "policy_attachments": policy_attachments,
        "role_arn": role.arn,
        "role_name": role.name
    }


def create_node_group_role(tags: Dict[str, str] = None) -> Dict[str, any]:
    """
    Create IAM role for EKS worker nodes

    Args:
        tags: Additional tags

    Returns:
        Dict with role resource, its policy attachments and outputs
    """
    tags = tags or {}

    role = aws.iam.Role(
        "node-iam-role",
        assume_role_policy=assume_role_policy("ec2.amazonaws.com"),
        tags={
            **tags,
            "Module": "iam"
        }
    )

    policy_attachments = {}
    for resource_name, policy_arn in NODE_POLICIES:
        policy_attachments[policy_arn] = aws.iam.RolePolicyAttachment(
            resource_name,
            policy_arn=policy_arn,
            role=role.name
        )

    return {
        "role": role,
        "policy_attachments": policy_attachments,
        "role_arn": role.arn,
        "role_name": role.name
    }


def create_iam_resources(attach_cluster_policy: bool = False, tags: Dict[str, str] = None) -> Dict[str, any]:
    """
    Create IAM resources for EKS

    Args:
        attach_cluster_policy: Attach AmazonEKSClusterPolicy to the cluster role
        tags: Additional tags

    Returns:
        Dict with all IAM resources and outputs
    """
    tags = tags or {}

    cluster_role_result = create_cluster_role(attach_cluster_policy, tags)
    node_role_result = create_node_group_role(tags)

    return {
        "cluster_role_arn": cluster_role_result["role_arn"],
        "cluster_role_name": cluster_role_result["role_name"],
        "node_group_role_arn": node_role_result["role_arn"],
        "node_group_role_name": node_role_result["role_name"],
        # Keep references to resources for dependencies
        "_cluster_role": cluster_role_result["role"],
        "_node_role": node_role_result["role"],
        "_cluster_policy_attachments": cluster_role_result["policy_attachments"],
        "_node_policy_attachments": node_role_result["policy_attachments"]
    }
