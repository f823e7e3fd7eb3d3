"""
EKS Module Functions
Creates the EKS cluster and its managed node group
"""

import pulumi
import pulumi_aws as aws
from typing import Dict, List, Optional


def create_eks_cluster(role_arn: pulumi.Output[str], subnet_ids: List[str],
                       security_group_ids: List[pulumi.Output[str]],
                       public_access_cidrs: List[str] = None,
                       tags: Dict[str, str] = None) -> Dict[str, any]:
    """
    Create EKS cluster

    Args:
        role_arn: IAM role ARN for the control plane
        subnet_ids: List of subnet IDs
        security_group_ids: List of security group IDs
        public_access_cidrs: List of CIDRs allowed to reach the public endpoint
        tags: Tags, including the display Name

    Returns:
        Dict with cluster resource and outputs
    """
    tags = tags or {}
    public_access_cidrs = public_access_cidrs or ["0.0.0.0/0"]

    cluster = aws.eks.Cluster(
        "eks-cluster",
        role_arn=role_arn,
        vpc_config=aws.eks.ClusterVpcConfigArgs(
            subnet_ids=subnet_ids,
            public_access_cidrs=public_access_cidrs,
            security_group_ids=security_group_ids
        ),
        tags=tags
    )

    return {
        "cluster": cluster,
        "cluster_name": cluster.name,
        "cluster_arn": cluster.arn,
        "cluster_endpoint": cluster.endpoint
    }


def create_node_group(cluster_name: pulumi.Output[str], role_arn: pulumi.Output[str],
                      subnet_ids: List[str], desired_size: int, max_size: int, min_size: int,
                      depends_on: Optional[List[pulumi.Resource]] = None,
                      tags: Dict[str, str] = None) -> Dict[str, any]:
    """
    Create EKS managed node group with a static size

    Args:
        cluster_name: EKS cluster name
        role_arn: IAM role ARN for the nodes
        subnet_ids: List of subnet IDs
        desired_size: Desired number of nodes
        max_size: Maximum number of nodes
        min_size: Minimum number of nodes
        depends_on: Resources that must exist first (node role policy attachments)
        tags: Additional tags

    Returns:
        Dict with node group resource and outputs
    """
    tags = tags or {}

    node_group = aws.eks.NodeGroup(
        "eks-node-group",
        cluster_name=cluster_name,
        node_group_name="eks-node-group",
        node_role_arn=role_arn,
        subnet_ids=subnet_ids,
        scaling_config=aws.eks.NodeGroupScalingConfigArgs(
            desired_size=desired_size,
            max_size=max_size,
            min_size=min_size
        ),
        tags={
            **tags,
            "Module": "eks"
        },
        opts=pulumi.ResourceOptions(depends_on=depends_on or [])
    )

    return {
        "node_group": node_group,
        "node_group_arn": node_group.arn,
        "node_group_status": node_group.status
    }


def create_eks_resources(cluster_role_arn: pulumi.Output[str], node_group_role_arn: pulumi.Output[str],
                         subnet_ids: List[str], security_group_id: pulumi.Output[str],
                         node_desired_size: int = 2, node_max_size: int = 2, node_min_size: int = 1,
                         node_policy_attachments: Optional[List[pulumi.Resource]] = None,
                         public_access_cidrs: List[str] = None,
                         cluster_tags: Dict[str, str] = None,
                         tags: Dict[str, str] = None) -> Dict[str, any]:
    """
    Create the EKS cluster and its node group

    Args:
        cluster_role_arn: IAM role ARN for the cluster
        node_group_role_arn: IAM role ARN for the node group
        subnet_ids: List of subnet IDs, shared by cluster and node group
        security_group_id: Security group attached to the cluster
        node_desired_size: Desired number of nodes
        node_max_size: Maximum number of nodes
        node_min_size: Minimum number of nodes
        node_policy_attachments: Node role attachments the node group waits for
        public_access_cidrs: List of CIDRs for public access
        cluster_tags: Tags for the cluster
        tags: Additional tags for the node group

    Returns:
        Dict with all EKS resources and outputs
    """
    tags = tags or {}

    cluster_result = create_eks_cluster(
        role_arn=cluster_role_arn,
        subnet_ids=subnet_ids,
        security_group_ids=[security_group_id],
        public_access_cidrs=public_access_cidrs,
        tags=cluster_tags
    )

    node_group_result = create_node_group(
        cluster_name=cluster_result["cluster"].name,
        role_arn=node_group_role_arn,
        subnet_ids=subnet_ids,
        desired_size=node_desired_size,
        max_size=node_max_size,
        min_size=node_min_size,
        depends_on=node_policy_attachments,
        tags=tags
    )

    return {
        "cluster_name": cluster_result["cluster_name"],
        "cluster_arn": cluster_result["cluster_arn"],
        "cluster_endpoint": cluster_result["cluster_endpoint"],
        "node_group_arn": node_group_result["node_group_arn"],
        "node_group_status": node_group_result["node_group_status"],
        # Keep references to resources for dependencies
        "_cluster": cluster_result["cluster"],
        "_node_group": node_group_result["node_group"]
    }
