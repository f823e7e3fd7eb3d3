"""
Kubeconfig Module
Renders cluster access configuration from EKS outputs
"""

from .functions import create_kubeconfig, render_kubeconfig

__all__ = ["create_kubeconfig", "render_kubeconfig"]
