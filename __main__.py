"""
Minecraft on EKS
Default VPC, EKS cluster with one managed node group, and the minecraft Helm chart
"""
import pulumi
from minecraft_eks.config import get_config
from minecraft_eks.stack import create_minecraft_stack

# Configuration
config = get_config()

# Declare everything
stack = create_minecraft_stack(config)

# Exports
pulumi.export("vpc_id", stack["vpc_id"])
pulumi.export("subnet_ids", stack["subnet_ids"])
pulumi.export("security_group_id", stack["security_group_id"])
pulumi.export("cluster_name", stack["cluster_name"])
pulumi.export("cluster_endpoint", stack["cluster_endpoint"])
pulumi.export("cluster_role_arn", stack["cluster_role_arn"])
pulumi.export("node_group_role_arn", stack["node_group_role_arn"])
pulumi.export("node_group_arn", stack["node_group_arn"])
pulumi.export("kubeconfig", pulumi.Output.secret(stack["kubeconfig"]))
pulumi.export("minecraft_release_status", stack["minecraft_release_status"])
pulumi.export("minecraft_namespace", stack["minecraft_namespace"])
