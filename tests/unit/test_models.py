from build_planner.models import BuildPlan, SoftwareEnvironment, SoftwarePackage


def test_build_plan_base_image():
    """Test that base_image joins the base name and version."""
    plan = BuildPlan(runtime="R", base_version="16.04")
    assert plan.base_image == "ubuntu:16.04"


def test_build_plan_defaults_are_empty():
    """Test that optional plan steps default to empty or absent."""
    plan = BuildPlan(runtime="R", base_version="16.04")
    assert plan.env_vars == []
    assert plan.apt_repos == []
    assert plan.install_command is None
    assert plan.run_command is None


def test_requirement_lists_are_not_shared():
    """Test that each instance gets its own requirement list."""
    first = SoftwarePackage(name="a")
    second = SoftwarePackage(name="b")
    first.software_requirements.append(SoftwarePackage(name="c"))
    assert second.software_requirements == []
    assert SoftwareEnvironment(name="x").software_requirements == []
