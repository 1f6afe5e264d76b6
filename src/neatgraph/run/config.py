import configparser
import numbers
import os
from neatgraph.activations import activations

class Config:

    @staticmethod
    def _parse_squash(raw_squash):
        """
        Parse the squashing function from its name.

        Parameters:
            raw_squash: Either the name of a squashing function (see 'basic_activations.py'),
                        or a callable

        Returns:
            The squashing function
        """
        # If already a function, return as-is
        if callable(raw_squash):
            return raw_squash

        name = raw_squash.strip()
        if name not in activations:
            raise ValueError(f"Invalid squashing function '{name}', expected one of {list(activations.keys())}")
        return activations[name]

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a default Config for manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.num_inputs      = 2
            self.num_outputs     = 1
            self.squash          = 'linear'
            self.eval_iterations = 100
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [NETWORK]

        # The number of input nodes, through which the network receives inputs.
        self.num_inputs = get_value('NETWORK', 'num_inputs', int)

        # The number of output nodes, to which the network delivers outputs.
        self.num_outputs = get_value('NETWORK', 'num_outputs', int)

        # [EVALUATION]

        # Squashing function applied to the weighted input sum of every node.
        # Options: "linear", "sigmoid", "signed_sigmoid", "relu" (see 'basic_activations.py').
        self.squash = get_value('EVALUATION', 'squash', str, default='linear')

        # The number of relaxation passes performed by each evaluation.
        # This is a fixed count: evaluation does not stop early on convergence.
        self.eval_iterations = get_value('EVALUATION', 'eval_iterations', int, default=100)

    def __setattr__(self, name, value):
        """
        Override 'setattr' to validate settings and to resolve squashing functions.
        This allows users to write config.squash = "sigmoid" and have it
        automatically converted to the function; the name is kept in 'squash_name'.
        """
        if name in ('squash', 'num_inputs', 'num_outputs', 'eval_iterations') and value is None:
            raise ValueError(f"'{name}' must be set, got None")

        if name == 'squash':
            squash = self._parse_squash(value)
            super().__setattr__('squash_name', value.strip() if isinstance(value, str) else 'custom')
            value = squash
        elif name in ('num_inputs', 'num_outputs', 'eval_iterations'):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(f"'{name}' must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"'{name}' must be non-negative, got {value}")
        super().__setattr__(name, value)
