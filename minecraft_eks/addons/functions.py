"""
Addons Module Functions
Kubernetes provider and applications deployed onto the EKS cluster
"""

import pulumi
import pulumi_kubernetes as k8s
from typing import Any, Dict

DEFAULT_MOTD = "Cloud Native Türkiye - Minecraft Server"


def minecraft_values(motd: str = DEFAULT_MOTD, service_type: str = "LoadBalancer") -> Dict[str, Any]:
    """Helm value overrides for the minecraft chart; the EULA is always accepted"""
    return {
        "minecraftServer": {
            "eula": True,
            "motd": motd,
            "serviceType": service_type
        }
    }


def create_kubernetes_provider(kubeconfig: 'pulumi.Output[str]', node_group: pulumi.Resource) -> k8s.Provider:
    """
    Create Kubernetes provider for the EKS cluster

    The provider waits for the node group so workloads have nodes to run on.

    Args:
        kubeconfig: Rendered kubeconfig
        node_group: EKS node group

    Returns:
        Kubernetes provider instance
    """
    return k8s.Provider(
        "k8sprovider",
        kubeconfig=kubeconfig,
        opts=pulumi.ResourceOptions(depends_on=[node_group])
    )


def deploy_minecraft_release(provider: k8s.Provider, chart: str, version: str, repo: str,
                             namespace: str, values: Dict[str, Any]) -> Dict[str, any]:
    """
    Deploy the Minecraft server using Helm

    Args:
        provider: Kubernetes provider
        chart: Chart name
        version: Chart version
        repo: Chart repository URL
        namespace: Namespace, created if missing
        values: Chart value overrides

    Returns:
        Dict with release resource and outputs
    """
    release = k8s.helm.v3.Release(
        "minecraft",
        chart=chart,
        version=version,
        repository_opts=k8s.helm.v3.RepositoryOptsArgs(
            repo=repo
        ),
        create_namespace=True,
        namespace=namespace,
        values=values,
        opts=pulumi.ResourceOptions(provider=provider)
    )

    return {
        "release": release,
        "release_status": release.status,
        "namespace": namespace
    }


def create_addons_resources(kubeconfig: 'pulumi.Output[str]', node_group: pulumi.Resource,
                            chart: str = "minecraft",
                            chart_version: str = "4.4.0",
                            chart_repo: str = "https://itzg.github.io/minecraft-server-charts",
                            namespace: str = "minecraft",
                            values: Dict[str, Any] = None) -> Dict[str, any]:
    """
    Create the Kubernetes provider and deploy Minecraft

    Args:
        kubeconfig: Rendered kubeconfig
        node_group: Node group the provider waits for
        chart: Chart name
        chart_version: Chart version
        chart_repo: Chart repository URL
        namespace: Release namespace
        values: Chart value overrides, defaults to minecraft_values()

    Returns:
        Dict with release outputs
    """
    values = values or minecraft_values()

    k8s_provider = create_kubernetes_provider(kubeconfig, node_group)
    pulumi.log.info(f"Deploying {chart} {chart_version} into namespace {namespace}")
    release_result = deploy_minecraft_release(
        k8s_provider, chart, chart_version, chart_repo, namespace, values
    )

    return {
        "minecraft_release_status": release_result["release_status"],
        "minecraft_namespace": release_result["namespace"],
        # Keep references to resources for dependencies
        "_k8s_provider": k8s_provider,
        "_release": release_result["release"]
    }
