"""
VPC Module Functions
Looks up the default VPC and its subnets, and creates the game security group
"""

import pulumi
import pulumi_aws as aws
from typing import Dict, List, Any

from minecraft_eks.errors import DefaultVpcNotFoundError


def get_default_vpc() -> Dict[str, Any]:
    """
    Look up the account's default VPC

    Returns:
        Dict with the lookup result and VPC id

    Raises:
        DefaultVpcNotFoundError: no default VPC exists or the lookup failed
    """
    try:
        vpc = aws.ec2.get_vpc(default=True)
    except Exception as e:
        raise DefaultVpcNotFoundError(f"Could not look up the default VPC: {e}") from e

    return {
        "vpc": vpc,
        "vpc_id": vpc.id
    }


def get_vpc_subnet_ids(vpc_id: str) -> List[str]:
    """
    List subnet IDs in a VPC, in the order the provider returns them

    Args:
        vpc_id: VPC ID to filter on

    Returns:
        List of subnet IDs
    """
    subnets = aws.ec2.get_subnets(
        filters=[aws.ec2.GetSubnetsFilterArgs(
            name="vpc-id",
            values=[vpc_id]
        )]
    )
    return list(subnets.ids)


def create_game_security_group(name: str, vpc_id: str, port: int = 25565,
                               tags: Dict[str, str] = None) -> Dict[str, Any]:
    """
    Create security group exposing the game port

    One ingress rule for the game port from anywhere, one egress rule
    allowing all outbound traffic.

    Args:
        name: Resource name
        vpc_id: VPC ID
        port: TCP port to open
        tags: Additional tags

    Returns:
        Dict with security group resource and outputs
    """
    tags = tags or {}

    security_group = aws.ec2.SecurityGroup(
        name,
        description="EKS Security Group",
        vpc_id=vpc_id,
        ingress=[aws.ec2.SecurityGroupIngressArgs(
            description="Allow Minecraft from VPC",
            protocol="tcp",
            from_port=port,
            to_port=port,
            cidr_blocks=["0.0.0.0/0"]
        )],
        egress=[aws.ec2.SecurityGroupEgressArgs(
            description="Allow all outbound traffic",
            protocol="-1",
            from_port=0,
            to_port=0,
            cidr_blocks=["0.0.0.0/0"]
        )],
        tags={
            **tags,
            "Module": "vpc"
        }
    )

    return {
        "security_group": security_group,
        "security_group_id": security_group.id
    }


def create_vpc_resources(minecraft_port: int = 25565, tags: Dict[str, str] = None) -> Dict[str, Any]:
    """
    Resolve the default network and create the game security group

    Args:
        minecraft_port: TCP port exposed by the security group
        tags: Additional tags for all resources

    Returns:
        Dict with network outputs
    """
    tags = tags or {}

    vpc_result = get_default_vpc()
    subnet_ids = get_vpc_subnet_ids(vpc_result["vpc_id"])
    pulumi.log.info(f"Using default VPC {vpc_result['vpc_id']} with {len(subnet_ids)} subnets")

    sg_result = create_game_security_group("eks-sg", vpc_result["vpc_id"], minecraft_port, tags)

    return {
        "vpc_id": vpc_result["vpc_id"],
        "subnet_ids": subnet_ids,
        "security_group_id": sg_result["security_group_id"],
        # Keep references to resources for dependencies
        "_vpc": vpc_result["vpc"],
        "_security_group": sg_result["security_group"]
    }
