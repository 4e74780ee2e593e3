"""Parameter layout and delay-mode tables of the tape echo."""

from __future__ import annotations

from dataclasses import dataclass

DELAY_SETTING_CHOICES = (
    "1", "2", "3", "4", "5", "6", "7", "8", "9", "10", "11", "Reverb Only",
)
REVERB_TYPE_CHOICES = ("Convolution", "Waveguide")
REVERB_ONLY = DELAY_SETTING_CHOICES.index("Reverb Only")

# Which of the three playheads each mode uses; the reverb-only mode has none.
_PLAYHEAD_STATES = (
    (1, 0, 0),
    (0, 1, 0),
    (0, 0, 1),
    (0, 1, 1),
    (1, 0, 0),
    (0, 1, 0),
    (0, 0, 1),
    (1, 1, 0),
    (0, 1, 1),
    (1, 0, 1),
    (1, 1, 1),
)
_DELAY_ENABLED = (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0)
_REVERB_ENABLED = (0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1)


@dataclass(frozen=True)
class FloatParameter:
    """A continuous parameter with a range and a default value."""

    parameter_id: str
    name: str
    minimum: float
    maximum: float
    default: float

    def __post_init__(self):
        if not self.minimum < self.maximum:
            raise ValueError(
                f"{self.parameter_id}: minimum must be below maximum"
            )
        if not self.minimum <= self.default <= self.maximum:
            raise ValueError(f"{self.parameter_id}: default lies outside the range")

    def clamp(self, value):
        """Limit ``value`` to the parameter's range."""
        return min(max(float(value), self.minimum), self.maximum)


@dataclass(frozen=True)
class ChoiceParameter:
    """A parameter that selects one of a fixed list of named options."""

    parameter_id: str
    name: str
    choices: tuple[str, ...]
    default: int

    def __post_init__(self):
        if not self.choices:
            raise ValueError(f"{self.parameter_id}: needs at least one choice")
        if not 0 <= self.default < len(self.choices):
            raise ValueError(f"{self.parameter_id}: default index out of range")

    @property
    def default_choice(self):
        """Name of the default option."""
        return self.choices[self.default]

    def index_of(self, choice):
        """Return the index of the option named ``choice``."""
        try:
            return self.choices.index(choice)
        except ValueError:
            raise KeyError(f"{self.parameter_id} has no choice {choice!r}") from None


@dataclass(frozen=True)
class ParameterGroup:
    """A named group of parameters as shown to a host."""

    group_id: str
    name: str
    separator: str
    parameters: tuple[FloatParameter | ChoiceParameter, ...]

    def __iter__(self):
        return iter(self.parameters)

    def find(self, parameter_id):
        """Return the parameter with ``parameter_id``; raise KeyError if absent."""
        for parameter in self.parameters:
            if parameter.parameter_id == parameter_id:
                return parameter
        raise KeyError(parameter_id)


def parameter_layout():
    """Return the plugin's parameter groups in host order."""
    inputs = ParameterGroup(
        "Input",
        "INPUT",
        "|",
        (
            FloatParameter("InputLevel", "INPUTLEVEL", 0.0, 5.0, 0.5),
            FloatParameter("WetDry", "WETDRY", 0.0, 1.0, 0.5),
            FloatParameter("Bass", "BASS", 0.0, 1.0, 0.5),
            FloatParameter("Treble", "TREBLE", 0.0, 1.0, 0.5),
        ),
    )
    delay = ParameterGroup(
        "Delay",
        "DELAY",
        "|",
        (
            ChoiceParameter("DelaySetting", "DELAYSETTING", DELAY_SETTING_CHOICES, 0),
            FloatParameter("RepeatRate", "REPEATRATE", 0.0, 1.0, 0.5),
            FloatParameter("Intensity", "INTENSITY", 0.0, 1.0, 0.5),
        ),
    )
    master = ParameterGroup(
        "Master",
        "MASTER",
        "|",
        (
            ChoiceParameter("ReverbType", "REVERBTYPE", REVERB_TYPE_CHOICES, 0),
            FloatParameter("ReverbVolume", "REVERBVOLUME", 0.0, 1.0, 0.5),
            FloatParameter("EchoVolume", "ECHOVOLUME", 0.0, 1.0, 0.5),
        ),
    )
    return (inputs, delay, master)


def find_parameter(layout, parameter_id):
    """Look ``parameter_id`` up across all groups of ``layout``."""
    for group in layout:
        try:
            return group.find(parameter_id)
        except KeyError:
            continue
    raise KeyError(parameter_id)


def _check_setting(setting):
    if not 0 <= setting < len(DELAY_SETTING_CHOICES):
        raise ValueError(f"delay setting must be 0..{REVERB_ONLY}, got {setting}")


def playhead_states(setting):
    """Return the on/off states of the three playheads for a delay mode.

    The reverb-only mode changes no playhead and gives ``None``: the states
    in use before it stay as they were.
    """
    _check_setting(setting)
    if setting == REVERB_ONLY:
        return None
    return _PLAYHEAD_STATES[setting]


def delay_enabled(setting):
    """Return 1 if the tape delay is heard in this mode, else 0."""
    _check_setting(setting)
    return _DELAY_ENABLED[setting]


def reverb_enabled(setting):
    """Return 1 if the reverb is heard in this mode, else 0."""
    _check_setting(setting)
    return _REVERB_ENABLED[setting]