"""
Kubeconfig Module Functions
"""

import pulumi
import pulumi_aws as aws

from minecraft_eks.errors import KubeconfigRenderError

KUBECONFIG_TEMPLATE = """apiVersion: v1
clusters:
- cluster:
    certificate-authority-data: {ca_data}
    server: {endpoint}
  name: kubernetes
contexts:
- context:
    cluster: kubernetes
    user: aws
  name: aws
current-context: aws
kind: Config
users:
- name: aws
  user:
    exec:
      apiVersion: client.authentication.k8s.io/v1beta1
      command: aws-iam-authenticator
      args:
        - "token"
        - "-i"
        - "{cluster_name}"
"""


def render_kubeconfig(cluster_name: str, endpoint: str, ca_data: str) -> str:
    """
    Render a kubeconfig that authenticates through aws-iam-authenticator

    Args:
        cluster_name: EKS cluster name, passed to the authenticator
        endpoint: API server URL
        ca_data: Base64 certificate authority bundle

    Returns:
        Kubeconfig document
    """
    for field, value in (("cluster name", cluster_name), ("endpoint", endpoint), ("certificate data", ca_data)):
        if not isinstance(value, str) or not value:
            raise KubeconfigRenderError(f"Expected a non-empty string for cluster {field}, got {value!r}")

    return KUBECONFIG_TEMPLATE.format(ca_data=ca_data, endpoint=endpoint, cluster_name=cluster_name)


def create_kubeconfig(cluster: aws.eks.Cluster) -> pulumi.Output[str]:
    """Kubeconfig output, rendered once name, endpoint and CA data resolve"""
    return pulumi.Output.all(
        cluster.name,
        cluster.endpoint,
        cluster.certificate_authority.data
    ).apply(lambda args: render_kubeconfig(args[0], args[1], args[2]))
