"""Client-side building blocks for a 7-DoF research robot arm and its gripper."""

__version__ = "0.9.2"

__all__ = [
    "control_types",
    "errors",
    "exceptions",
    "gripper",
    "gripper_state",
    "library_downloader",
    "library_loader",
    "load_calculations",
    "logger",
    "lowpass_filter",
    "model",
    "model_library",
]