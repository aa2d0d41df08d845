# fcikit

Client-side building blocks for a 7-joint research robot arm and its
gripper. Vectorised matrices use column-major order throughout. Joint-space
arrays have 7 entries, Cartesian twists have 6, 3x3 inertia tensors have 9
and homogeneous transforms have 16.

## Modules

- `fcikit.control_types`: the commands `Torques`, `JointPositions`,
  `JointVelocities`, `CartesianPose` and `CartesianVelocities`. They derive
  from `Finishable`. Each constructor checks the number of elements and
  raises `ValueError` when it is wrong. The Cartesian commands take an
  optional two-element `elbow` and provide `has_elbow()`.
  `motion_finished(command)` returns a copy with `motion_finished` set.
  The enums `ControllerMode` and `RealtimeConfig` are defined here as well.
- `fcikit.errors`: `ErrorKind` lists the 41 error flags in controller order.
  `Errors` is an immutable set of those flags. It is truthy when any flag
  is set, and each flag can be read as `errors[ErrorKind.X]` or as an
  attribute such as `errors.joint_reflex`. `active()` returns the set
  kinds. `str(errors)` gives a list of quoted names, for example
  `["joint_reflex", "power_limit_violation"]`.
- `fcikit.exceptions`: `FrankaException` is the base class. Its subclasses
  are `ControlException` (its `log` attribute holds the records passed to
  it), `CommandException`, `ProtocolException`, `ModelException`,
  `NetworkException`, `InvalidOperationException`, `RealtimeException` and
  `IncompatibleVersionException` (which has `server_version` and
  `library_version`).
- `fcikit.lowpass_filter`: `lowpass_filter()` is a first-order filter for a
  scalar. `cartesian_lowpass_filter()` filters a 16-value pose: the
  translation is filtered linearly and the orientation with slerp. Both
  raise `ValueError` when the sample time, the cutoff frequency or a sample
  is invalid. The module also defines `DEFAULT_CUTOFF_FREQUENCY` (100 Hz)
  and `MAX_CUTOFF_FREQUENCY` (1000 Hz).
- `fcikit.load_calculations`: `combine_center_of_mass()`,
  `combine_inertia_tensor()` and `skew_symmetric_matrix_from_vector()`
  merge the end effector and the payload into one body.
- `fcikit.logger`: `Logger(log_size)` is a ring that keeps the last
  `log_size` pairs of `LoggedState` and `RawCommand`. `flush()` returns
  them oldest first as `Record` objects, each holding a `RobotCommand`, and
  empties the ring. `log_to_csv()` renders the records as CSV with one
  header line. An empty log gives an empty string.
- `fcikit.gripper_state`: `GripperState` is a dataclass with `width`,
  `max_width`, `is_grasped`, `temperature` and `time` (a `timedelta`).
- `fcikit.gripper`: `Gripper(transport)` runs `homing()`, `grasp()`,
  `move()` and `stop()` over an object that follows the `GripperTransport`
  protocol. Each command returns `True` on success and `False` when the
  command was unsuccessful. It raises `CommandException` when the command
  fails or is aborted, and `ProtocolException` on an unknown status.
  `read_once()` throws away buffered states and returns the next one,
  converted by `convert_gripper_state()`, which reads the message id as
  milliseconds.
- `fcikit.library_loader`: `LibraryLoader(symbols)` takes a mapping of
  names to functions, or an object with those functions as attributes.
  `get_symbol(name)` raises `ModelException` when the name is missing or
  not callable.
- `fcikit.library_downloader`: `LibraryDownloader(fetch)` calls
  `fetch(architecture, operating_system)`, which must return
  `(LoadStatus, bytes)`. It writes the bytes to a temporary file whose path
  `path()` returns. The file is removed by `close()` or when the `with`
  block ends.
- `fcikit.model_library`: `ModelLibrary(loader)` looks up all 30 model
  functions through a `LibraryLoader` when it is created, and exposes them
  as attributes such as `joint1`, `zero_jacobian_ee`, `mass` and `gravity`.
- `fcikit.model`: `Model(library)` provides `pose()`, `body_jacobian()` and
  `zero_jacobian()` for each `Frame`, plus `mass()`, `coriolis()` and
  `gravity()`. It calls the library's functions with plain lists and checks
  the length of each result.

## Installation

```
pip install fcikit
```

To run the tests:

```
pip install "fcikit[test]"
pytest
```

## Examples

```python
from fcikit.lowpass_filter import lowpass_filter
from fcikit.control_types import JointPositions, motion_finished
from fcikit.errors import Errors, ErrorKind
from fcikit.logger import Logger, LoggedState, RawCommand, log_to_csv

filtered = lowpass_filter(0.001, 1.0, 0.0, 100.0)

command = motion_finished(JointPositions([0.0, -0.7, 0.0, -2.3, 0.0, 1.6, 0.8]))
assert command.motion_finished

errors = Errors()
print(bool(errors), errors[ErrorKind.JOINT_REFLEX], errors)

logger = Logger(50)
logger.log(LoggedState(), RawCommand())
csv_text = log_to_csv(logger.flush())
```

Using a model library given as plain Python functions:

```python
from fcikit.library_loader import LibraryLoader
from fcikit.model_library import ModelLibrary
from fcikit.model import Frame, Model

functions = {...}  # "O_T_J1", "O_J_J1", "M_NE", "c_NE", "g_NE", ...
model = Model(ModelLibrary(LibraryLoader(functions)))
pose = model.pose(Frame.FLANGE, [0.0] * 7)
```

## What the package does not do

- It opens no network connections. The gripper talks through a transport
  that you supply, and the model library is fetched through a `fetch`
  callable that you supply.
- It has no robot class and no control loop. It does not run callbacks at
  1 kHz, limit command rates or set realtime priority. `ControllerMode` and
  `RealtimeConfig` are only definitions.
- It does not contain the robot's kinematic and dynamic model. `Model` only
  calls the functions it is given. `LibraryDownloader` saves the downloaded
  bytes to a file but never loads them as native code.