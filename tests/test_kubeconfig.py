"""
Unit tests for kubeconfig rendering
"""

import unittest
from unittest.mock import Mock, patch
import sys
import os

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from minecraft_eks.errors import KubeconfigRenderError
from minecraft_eks.kubeconfig.functions import create_kubeconfig, render_kubeconfig

EXPECTED = """apiVersion: v1
clusters:
- cluster:
    certificate-authority-data: ABC123
    server: https://x.example
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
        - "my-mincraft-eks-cluster"
"""


class TestRenderKubeconfig(unittest.TestCase):

    def test_matches_template(self):
        rendered = render_kubeconfig("my-mincraft-eks-cluster", "https://x.example", "ABC123")
        self.assertEqual(rendered, EXPECTED)

    def test_values_land_only_in_their_positions(self):
        rendered = render_kubeconfig("c-name", "https://e.example", "CA-DATA")

        self.assertEqual(rendered.count("c-name"), 1)
        self.assertEqual(rendered.count("https://e.example"), 1)
        self.assertEqual(rendered.count("CA-DATA"), 1)
        self.assertIn('        - "c-name"\n', rendered)
        self.assertIn("    server: https://e.example\n", rendered)
        self.assertIn("    certificate-authority-data: CA-DATA\n", rendered)

    def test_rejects_missing_values(self):
        with self.assertRaises(KubeconfigRenderError):
            render_kubeconfig("name", "https://x.example", None)
        with self.assertRaises(KubeconfigRenderError):
            render_kubeconfig("", "https://x.example", "ABC123")

    def test_rejects_unexpected_shapes(self):
        with self.assertRaises(KubeconfigRenderError):
            render_kubeconfig("name", "https://x.example", {"data": "ABC123"})


class TestCreateKubeconfig(unittest.TestCase):

    @patch('minecraft_eks.kubeconfig.functions.pulumi')
    def test_joins_cluster_outputs(self, mock_pulumi):
        cluster = Mock()
        cluster.name = "name-output"

        result = create_kubeconfig(cluster)

        mock_pulumi.Output.all.assert_called_once_with(
            "name-output", cluster.endpoint, cluster.certificate_authority.data
        )
        self.assertIs(result, mock_pulumi.Output.all.return_value.apply.return_value)

        render = mock_pulumi.Output.all.return_value.apply.call_args[0][0]
        self.assertEqual(render(["my-mincraft-eks-cluster", "https://x.example", "ABC123"]), EXPECTED)


if __name__ == "__main__":
    unittest.main(verbosity=2)
