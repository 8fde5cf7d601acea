import importlib
import inspect


def test_package_reexports_exist():
    pkg = importlib.import_module("cartraj")

    for name in [
        "QuinticTimeScaling",
        "LinePath",
        "CircularArc",
        "TrajectoryAssembler",
        "SixDofChannel",
        "TrajectoryError",
    ]:
        assert hasattr(pkg, name), f"cartraj missing {name}"
        assert inspect.isclass(getattr(pkg, name)), f"{name} should be a class"

    for name in ["linear_with_timing", "circular_with_timing", "interpolate_angles", "frenet_angles"]:
        assert callable(getattr(pkg, name)), f"{name} should be callable"

    assert isinstance(pkg.__version__, str)
