"""
VPC Module
Default VPC lookup and the Minecraft security group
"""

from .functions import create_vpc_resources

__all__ = ["create_vpc_resources"]
