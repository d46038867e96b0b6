"""Test resource scanners."""

import io

import pytest
from rich.console import Console

from kube_scanner.k8s.client import ClusterCLI
from kube_scanner.k8s.scanner import DeploymentScanner, PodScanner, ScanError


class TestPodScanner:
    def test_runs_cli_with_correct_arguments(self, fake_launcher, console):
        """Test the CLI is invoked with get/namespace/wide arguments."""
        scanner = PodScanner("test-ns", client=ClusterCLI(launcher=fake_launcher), console=console)

        scanner.scan()

        assert fake_launcher.calls == [
            ("oc", ["get", "pods", "-n", "test-ns", "-o", "wide"]),
        ]

    def test_success_prints_output(self, fake_launcher, console, console_buffer):
        """Test captured output is relayed to the console."""
        scanner = PodScanner("test-ns", client=ClusterCLI(launcher=fake_launcher), console=console)

        output = scanner.scan()

        assert output == "mock output"
        assert "mock output" in console_buffer.getvalue()

    def test_output_is_not_interpreted_as_markup(self, make_launcher, console, console_buffer):
        """Test brackets in CLI output are printed verbatim."""
        launcher = make_launcher(output="web-1  [bold]1/1[/bold]  :warning:")
        scanner = PodScanner("test-ns", client=ClusterCLI(launcher=launcher), console=console)

        scanner.scan()

        assert "[bold]1/1[/bold]  :warning:" in console_buffer.getvalue()

    def test_failure_raises_scan_error(self, failing_launcher, console, console_buffer):
        """Test a failing CLI call raises with an identifiable message."""
        scanner = PodScanner(
            "fail-ns", client=ClusterCLI(launcher=failing_launcher), console=console
        )

        with pytest.raises(ScanError, match="error running oc") as exc_info:
            scanner.scan()

        assert "command failed" in str(exc_info.value)
        assert exc_info.value.reason == "command failed"
        assert exc_info.value.resource_type == "pods"
        assert console_buffer.getvalue() == ""

    def test_custom_binary_in_error(self, failing_launcher, console):
        """Test the error names the configured executable."""
        client = ClusterCLI(binary="kubectl", launcher=failing_launcher)
        scanner = PodScanner("fail-ns", client=client, console=console)

        with pytest.raises(ScanError, match="error running kubectl: command failed"):
            scanner.scan()


class TestDeploymentScanner:
    def test_build_args(self):
        """Test deployment arguments."""
        scanner = DeploymentScanner("demo-ns")

        assert scanner.build_args() == ["get", "deployments", "-n", "demo-ns", "-o", "wide"]

    def test_runs_cli_with_correct_arguments(self, fake_launcher, console):
        """Test the CLI is invoked for deployments."""
        scanner = DeploymentScanner(
            "test-ns", client=ClusterCLI(launcher=fake_launcher), console=console
        )

        scanner.scan()

        assert fake_launcher.calls == [
            ("oc", ["get", "deployments", "-n", "test-ns", "-o", "wide"]),
        ]

    def test_namespace_is_read_only(self):
        """Test the namespace cannot be reassigned."""
        scanner = DeploymentScanner("demo-ns")

        with pytest.raises(AttributeError):
            scanner.namespace = "other"


class TestOutputRelay:
    WIDE_OUTPUT = (
        "NAME    READY   STATUS    RESTARTS   AGE   IP            NODE"
        "                                     NOMINATED NODE   READINESS GATES\n"
        "web-1   1/1     Running   0          3d    10.128.2.15   "
        "worker-node-0.cluster.example.internal   <none>           <none>\n"
    )

    def test_wide_lines_are_not_wrapped(self, make_launcher):
        """Test wide output survives a 80-column console unchanged."""
        buffer = io.StringIO()
        console = Console(file=buffer, width=80)
        launcher = make_launcher(output=self.WIDE_OUTPUT)
        scanner = PodScanner("demo-ns", client=ClusterCLI(launcher=launcher), console=console)

        scanner.scan()

        assert buffer.getvalue() == self.WIDE_OUTPUT

    def test_unterminated_output_gets_newline(self, make_launcher, console, console_buffer):
        """Test output without a trailing newline is terminated once."""
        scanner = PodScanner(
            "demo-ns", client=ClusterCLI(launcher=make_launcher(output="No resources found")),
            console=console,
        )

        scanner.scan()

        assert console_buffer.getvalue() == "No resources found\n"
