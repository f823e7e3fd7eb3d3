"""
Configuration management for the Minecraft EKS deployment
"""

import pulumi
from typing import Dict

from minecraft_eks.addons.functions import DEFAULT_MOTD, minecraft_values


class Config:
    """Centralized configuration management for the Minecraft EKS deployment"""

    def __init__(self, config: pulumi.Config = None):
        self.config = config or pulumi.Config()

        # Cluster Configuration
        self.cluster_tag_name = self.config.get("clusterTagName") or "my-mincraft-eks-cluster"
        self.public_access_cidrs = self.config.get_object("publicAccessCidrs") or ["0.0.0.0/0"]

        # Known gap: the control plane role gets no managed policy unless asked for
        self.attach_cluster_policy = self.config.get_bool("attachClusterPolicy") or False

        # Node Configuration
        self.node_desired_size = self._get_int("nodeDesiredSize", 2)
        self.node_min_size = self._get_int("nodeMinSize", 1)
        self.node_max_size = self._get_int("nodeMaxSize", 2)

        # Minecraft Configuration
        self.minecraft_port = self._get_int("minecraftPort", 25565)
        self.chart_name = self.config.get("chartName") or "minecraft"
        self.chart_version = self.config.get("chartVersion") or "4.4.0"
        self.chart_repo = self.config.get("chartRepo") or "https://itzg.github.io/minecraft-server-charts"
        self.minecraft_namespace = self.config.get("minecraftNamespace") or "minecraft"
        self.minecraft_motd = self.config.get("minecraftMotd") or DEFAULT_MOTD
        self.minecraft_service_type = self.config.get("minecraftServiceType") or "LoadBalancer"

        # Additional tags
        self.additional_tags = self.config.get_object("tags") or {}

        self._validate()

    def _get_int(self, key: str, default: int) -> int:
        value = self.config.get_int(key)
        return default if value is None else value

    def _validate(self):
        if self.node_min_size < 0:
            raise ValueError(f"nodeMinSize must not be negative, got {self.node_min_size}")
        if not self.node_min_size <= self.node_desired_size <= self.node_max_size:
            raise ValueError(
                "Node group scaling must satisfy min <= desired <= max, got "
                f"min={self.node_min_size} desired={self.node_desired_size} max={self.node_max_size}"
            )
        if not 0 < self.minecraft_port < 65536:
            raise ValueError(f"minecraftPort out of range: {self.minecraft_port}")

    @property
    def common_tags(self) -> Dict[str, str]:
        """Get common tags for all resources"""
        base_tags = {
            "Project": "minecraft-eks",
            "ManagedBy": "pulumi"
        }
        base_tags.update(self.additional_tags)
        return base_tags

    @property
    def minecraft_values(self) -> Dict[str, Dict]:
        """Helm value overrides for the minecraft chart"""
        return minecraft_values(self.minecraft_motd, self.minecraft_service_type)

    @property
    def cluster_tags(self) -> Dict[str, str]:
        """Tags for the EKS cluster: user tags plus the display name, which always wins"""
        return {**self.additional_tags, "Name": self.cluster_tag_name}


def get_config() -> Config:
    """Get the global configuration instance"""
    return Config()
