"""
Step definitions for DNS Legacy Compat integration tests.
"""

from unittest.mock import patch

import yaml
from behave import given, then, when

from dns_legacy_compat.cli.main import main
from dns_legacy_compat.core.endpoint_manager import EndpointManager
from dns_legacy_compat.parsers.manifest import ManifestParser


def _service_manifest(name, annotations=None, labels=None, ingress=None):
    return {
        "apiVersion": "v1",
        "kind": "Service",
        "metadata": {
            "name": name,
            "namespace": "default",
            "annotations": annotations or {},
            "labels": labels or {},
        },
        "spec": {"type": "LoadBalancer"},
        "status": {"loadBalancer": {"ingress": ingress or []}},
    }


def _ingress_from_table(table):
    ingress = []
    for row in table:
        entry = {}
        if row["ip"]:
            entry["ip"] = row["ip"]
        if row["hostname"]:
            entry["hostname"] = row["hostname"]
        ingress.append(entry)
    return ingress


def _write_manifest(context, manifest):
    path = context.test_data_dir / f"manifest_{len(context.manifest_files)}.yaml"
    with open(path, "w") as f:
        yaml.safe_dump(manifest, f)
    context.manifest_files.append(path)


@given('a Service annotated with Mate hostname "{hostname}" and ingress')
def step_impl(context, hostname):
    """Create a Mate-annotated Service manifest."""
    _write_manifest(
        context,
        _service_manifest(
            "mate-app",
            annotations={"zalando.org/dnsname": hostname},
            ingress=_ingress_from_table(context.table),
        ),
    )


@given('a Service labeled dns "{label}" with Molecule domains "{domains}" and ingress')
def step_impl(context, label, domains):
    """Create a Molecule-annotated Service manifest."""
    _write_manifest(
        context,
        _service_manifest(
            "molecule-app",
            annotations={"domainName": domains},
            labels={"dns": label},
            ingress=_ingress_from_table(context.table),
        ),
    )


@given("the example Service manifests")
def step_impl(context):
    """Use the manifests shipped in the examples directory."""
    context.manifest_files.append(context.example_manifest)


@when('I extract legacy endpoints in "{mode}" mode')
def step_impl(context, mode):
    """Parse the manifests and run the endpoint manager."""
    for path in context.manifest_files:
        context.services.extend(ManifestParser(str(path)).parse())

    manager = EndpointManager({"compatibility": mode})
    context.results = manager.extract_endpoints(context.services)


@when('I run the CLI in "{mode}" mode')
def step_impl(context, mode):
    """Run the command-line interface with an output file."""
    context.output_file = context.test_data_dir / "endpoints.yaml"
    args = ["--config", str(context.test_config_file), "--compatibility", mode]
    for path in context.manifest_files:
        args.extend(["--manifest", str(path)])
    args.extend(["--output-file", str(context.output_file)])

    with patch("dns_legacy_compat.cli.main.config_logger"):
        try:
            main(args)
        except SystemExit as e:
            context.exit_code = e.code


@then("the following endpoints should be produced")
def step_impl(context):
    """Compare extracted endpoints with the expected table, in order."""
    actual = [
        (e.dns_name, e.record_type.value, e.target) for _, e in context.results
    ]
    expected = [(row["dns_name"], row["type"], row["target"]) for row in context.table]
    assert actual == expected, f"Expected {expected}, got {actual}"


@then("no endpoints should be produced")
def step_impl(context):
    """Verify nothing was extracted."""
    assert context.results == [], f"Expected no endpoints, got {context.results}"


@then("the CLI should succeed")
def step_impl(context):
    """Verify the CLI exit code."""
    assert context.exit_code == 0, f"CLI exited with {context.exit_code}"


@then("the output file should list {count:d} endpoints")
def step_impl(context, count):
    """Verify the saved endpoint count."""
    with open(context.output_file) as f:
        document = yaml.safe_load(f)
    assert len(document["endpoints"]) == count, document
