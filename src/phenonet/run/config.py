import configparser
import os

class Config:

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a Config holding the defaults.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, every setting takes its default value
                         ('num_inputs' and 'num_outputs' are left as None).
        """
        self._set_defaults()

        if config_file is None:
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

        # Whether genomes decode to acyclic (feedforward) networks.
        # If 'False', genomes may contain cycles and decode to recurrent networks.
        self.is_acyclic = get_value('NETWORK', 'is_acyclic', bool, default=self.is_acyclic)

        # The activation function applied to every non-input node.
        # For the list of all available choices, see the 'activations' package.
        self.activation = get_value('NETWORK', 'activation', str, default=self.activation)

        # [DECODER]

        # The number of relaxation iterations per activation of a cyclic network.
        # More iterations let signals travel further through the network.
        # Not applicable to acyclic networks.
        self.activation_count = get_value('DECODER', 'activation_count', int, default=self.activation_count)

        # Whether output values are clamped to the interval [0, 1].
        self.bounded_output = get_value('DECODER', 'bounded_output', bool, default=self.bounded_output)

        # If 'True', always use the scalar execution path, even when the
        # vectorized one is available (useful for reproducibility).
        self.suppress_hardware_acceleration = get_value('DECODER', 'suppress_hardware_acceleration', bool,
                                                        default=self.suppress_hardware_acceleration)

        # The floating-point precision of network buffers and weights.
        # Allowed values:
        #   "double" - 64 bit floats
        #   "single" - 32 bit floats
        self.precision = get_value('DECODER', 'precision', str, default=self.precision)

        # [EVALUATION]

        # Number of parallel processes used to evaluate genomes.
        #   1  - serial evaluation
        #   -1 - use all available CPU cores
        self.num_jobs = get_value('EVALUATION', 'num_jobs', int, default=self.num_jobs)

        # The fitness assigned to genomes that cannot be decoded.
        self.null_fitness = get_value('EVALUATION', 'null_fitness', float, default=self.null_fitness)

        self._validate()

    def _set_defaults(self):
        self.num_inputs                     = None
        self.num_outputs                    = None
        self.is_acyclic                     = True
        self.activation                     = 'leaky_relu'
        self.activation_count               = 1
        self.bounded_output                 = False
        self.suppress_hardware_acceleration = False
        self.precision                      = 'double'
        self.num_jobs                       = 1
        self.null_fitness                   = 0.0

    def _validate(self):
        for key in ('activation_count', 'bounded_output', 'suppress_hardware_acceleration', 'precision'):
            if getattr(self, key) is None:
                raise ValueError(f"[DECODER] '{key}' cannot be None")
        if self.precision not in ('double', 'single'):
            raise ValueError(f"precision must be 'double' or 'single', got '{self.precision}'")
        if self.activation_count < 1:
            raise ValueError(f"activation_count must be at least 1, got {self.activation_count}")
