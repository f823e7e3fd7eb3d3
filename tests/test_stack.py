"""
Unit tests for the whole stack declaration
"""

import unittest
from unittest.mock import Mock, patch
import sys
import os

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from minecraft_eks.config import Config
from minecraft_eks.errors import DefaultVpcNotFoundError
from minecraft_eks.stack import create_minecraft_stack
from fakes import FakePulumiConfig


class TestMinecraftStack(unittest.TestCase):

    def setUp(self):
        patches = {
            "vpc_aws": patch('minecraft_eks.vpc.functions.aws'),
            "iam_aws": patch('minecraft_eks.iam.functions.aws'),
            "eks_aws": patch('minecraft_eks.eks.functions.aws'),
            "addons_k8s": patch('minecraft_eks.addons.functions.k8s'),
        }
        for target in ('vpc', 'iam', 'eks', 'kubeconfig', 'addons'):
            patches[f"{target}_pulumi"] = patch(f'minecraft_eks.{target}.functions.pulumi')
        patches["stack_pulumi"] = patch('minecraft_eks.stack.pulumi')

        self.mocks = {}
        for key, p in patches.items():
            self.mocks[key] = p.start()
            self.addCleanup(p.stop)

        vpc_aws = self.mocks["vpc_aws"]
        vpc_aws.ec2.get_vpc.return_value = Mock(id="vpc-12345")
        vpc_aws.ec2.get_subnets.return_value = Mock(ids=["subnet-1", "subnet-2"])
        vpc_aws.ec2.SecurityGroup.return_value = Mock(id="sg-12345")

        self.node_group = Mock()
        self.mocks["eks_aws"].eks.NodeGroup.return_value = self.node_group

        self.config = Config(FakePulumiConfig())

    def test_declares_every_layer(self):
        result = create_minecraft_stack(self.config)

        self.assertEqual(result["vpc_id"], "vpc-12345")
        self.assertEqual(result["subnet_ids"], ["subnet-1", "subnet-2"])
        self.mocks["eks_aws"].eks.Cluster.assert_called_once()
        self.mocks["eks_aws"].eks.NodeGroup.assert_called_once()
        self.mocks["addons_k8s"].helm.v3.Release.assert_called_once()
        self.assertIs(result["kubeconfig"],
                      self.mocks["kubeconfig_pulumi"].Output.all.return_value.apply.return_value)

    def test_cluster_and_node_group_use_default_subnets(self):
        create_minecraft_stack(self.config)

        eks_aws = self.mocks["eks_aws"]
        _, vpc_config = eks_aws.eks.ClusterVpcConfigArgs.call_args
        _, node_group = eks_aws.eks.NodeGroup.call_args
        self.assertEqual(sorted(vpc_config["subnet_ids"]), ["subnet-1", "subnet-2"])
        self.assertEqual(sorted(node_group["subnet_ids"]), ["subnet-1", "subnet-2"])
        self.assertEqual(vpc_config["security_group_ids"], ["sg-12345"])

    def test_node_group_waits_for_node_policies(self):
        create_minecraft_stack(self.config)

        iam_aws = self.mocks["iam_aws"]
        _, opts = self.mocks["eks_pulumi"].ResourceOptions.call_args
        self.assertEqual(len(opts["depends_on"]), 3)
        self.assertTrue(all(dep is iam_aws.iam.RolePolicyAttachment.return_value
                            for dep in opts["depends_on"]))

    def test_provider_waits_for_node_group(self):
        create_minecraft_stack(self.config)

        self.mocks["addons_pulumi"].ResourceOptions.assert_any_call(depends_on=[self.node_group])
        _, provider = self.mocks["addons_k8s"].Provider.call_args
        self.assertIs(provider["kubeconfig"],
                      self.mocks["kubeconfig_pulumi"].Output.all.return_value.apply.return_value)

    def test_missing_default_vpc_declares_nothing(self):
        self.mocks["vpc_aws"].ec2.get_vpc.side_effect = Exception("no matching EC2 VPC found")

        with self.assertRaises(DefaultVpcNotFoundError):
            create_minecraft_stack(self.config)

        self.mocks["vpc_aws"].ec2.SecurityGroup.assert_not_called()
        self.mocks["iam_aws"].iam.Role.assert_not_called()
        self.mocks["iam_aws"].iam.RolePolicyAttachment.assert_not_called()
        self.mocks["eks_aws"].eks.Cluster.assert_not_called()
        self.mocks["eks_aws"].eks.NodeGroup.assert_not_called()
        self.mocks["addons_k8s"].Provider.assert_not_called()
        self.mocks["addons_k8s"].helm.v3.Release.assert_not_called()


if __name__ == "__main__":
    unittest.main(verbosity=2)
