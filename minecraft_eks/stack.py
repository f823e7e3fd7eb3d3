"""
Minecraft EKS stack
Wires the modules together in declaration order
"""

import pulumi
from typing import Any, Dict

from minecraft_eks.config import Config
from minecraft_eks.vpc.functions import create_vpc_resources
from minecraft_eks.iam.functions import create_iam_resources
from minecraft_eks.eks.functions import create_eks_resources
from minecraft_eks.kubeconfig.functions import create_kubeconfig
from minecraft_eks.addons.functions import create_addons_resources


def create_minecraft_stack(config: Config) -> Dict[str, Any]:
    """Declare every resource of the stack and return the merged outputs"""

    # 1. Default VPC, subnets and security group
    vpc_resources = create_vpc_resources(
        minecraft_port=config.minecraft_port,
        tags=config.common_tags
    )

    # 2. IAM roles
    iam_resources = create_iam_resources(
        attach_cluster_policy=config.attach_cluster_policy,
        tags=config.common_tags
    )

    # 3. Cluster and node group
    eks_resources = create_eks_resources(
        cluster_role_arn=iam_resources["cluster_role_arn"],
        node_group_role_arn=iam_resources["node_group_role_arn"],
        subnet_ids=vpc_resources["subnet_ids"],
        security_group_id=vpc_resources["security_group_id"],
        node_desired_size=config.node_desired_size,
        node_max_size=config.node_max_size,
        node_min_size=config.node_min_size,
        node_policy_attachments=list(iam_resources["_node_policy_attachments"].values()),
        public_access_cidrs=config.public_access_cidrs,
        cluster_tags=config.cluster_tags,
        tags=config.common_tags
    )

    # 4. Kubeconfig
    kubeconfig = create_kubeconfig(eks_resources["_cluster"])

    # 5. Minecraft
    addons_resources = create_addons_resources(
        kubeconfig=kubeconfig,
        node_group=eks_resources["_node_group"],
        chart=config.chart_name,
        chart_version=config.chart_version,
        chart_repo=config.chart_repo,
        namespace=config.minecraft_namespace,
        values=config.minecraft_values
    )

    pulumi.log.info("Minecraft EKS stack declared")

    return {
        **vpc_resources,
        **iam_resources,
        **eks_resources,
        **addons_resources,
        "kubeconfig": kubeconfig
    }
