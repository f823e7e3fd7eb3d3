"""
Addons Module
Kubernetes provider and the Minecraft Helm release
"""

from .functions import create_addons_resources

__all__ = ["create_addons_resources"]
