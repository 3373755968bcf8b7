"""
Scalar activation functions.

Each function maps one pre-activation value to one post-activation value,
using plain Python floats and the 'math' module. These are the reference
semantics: the vectorized forms in 'vectorized_activations' must agree with
them for every input.
"""

import math

# Leaky ReLU slope for negative inputs
LEAKY_RELU_SLOPE = 0.001

# Offset that moves f(0) to 0.5, in keeping with the logistic sigmoid
SHIFT_OFFSET = 0.5

# S-shaped ReLU thresholds and outer slope
SRELU_TL = 0.001
SRELU_TR = 0.999
SRELU_A  = 0.00001

# Self-normalizing ELU constants
SELU_LAMBDA = 1.0507009873554805
SELU_ALPHA  = 1.6732632423543772

# Scale applied to asinh, so the output spans roughly the same range as the other sigmoids
ARCSINH_SCALE = 1.2567348023993685

# Exponent arguments are clipped to this magnitude to prevent under/overflow
EXP_CLIP = 100.0

def _clip_exp_arg(x):
    return min(max(x, -EXP_CLIP), EXP_CLIP)

def identity_activation(x):
    return x

def clamped_activation(x):
    return min(max(x, -1.0), 1.0)

def relu_activation(x):
    return x if x > 0.0 else 0.0

def leaky_relu_activation(x):
    return x if x > 0.0 else x * LEAKY_RELU_SLOPE

def leaky_relu_shifted_activation(x):
    y = x + SHIFT_OFFSET
    if y < 0.0:
        y *= LEAKY_RELU_SLOPE
    return y

def srelu_activation(x):
    # Linear between the thresholds, a very shallow slope outside them
    if SRELU_TL < x < SRELU_TR:
        return x
    if x <= SRELU_TL:
        return SRELU_TL + (x - SRELU_TL) * SRELU_A
    return SRELU_TR + (x - SRELU_TR) * SRELU_A

def srelu_shifted_activation(x):
    return srelu_activation(x + SHIFT_OFFSET)

def max_minus_one_activation(x):
    return x if x > -1.0 else -1.0

def logistic_activation(x):
    return 1.0 / (1.0 + math.exp(-_clip_exp_arg(x)))

def logistic_steep_activation(x):
    return 1.0 / (1.0 + math.exp(-_clip_exp_arg(4.9 * x)))

def sigmoid_activation(x):
    K = 10
    return 1.0 / (1.0 + math.exp(-_clip_exp_arg(K * x)))

def tanh_activation(x):
    return math.tanh(x)

def arctan_activation(x):
    return math.atan(x) / math.pi + 0.5

def arcsinh_activation(x):
    return ARCSINH_SCALE * ((math.asinh(x) + 1.0) * 0.5)

def soft_sign_steep_activation(x):
    return 0.5 + x / (2.0 * (0.2 + abs(x)))

def scaled_elu_activation(x):
    if x >= 0.0:
        return SELU_LAMBDA * x
    return SELU_LAMBDA * (SELU_ALPHA * math.exp(_clip_exp_arg(x)) - SELU_ALPHA)

def gaussian_activation(x):
    z = _clip_exp_arg(x)
    return math.exp(-(z * z))

def sin_activation(x):
    # math.sin raises on infinities, np.sin gives nan
    return math.sin(x) if math.isfinite(x) else math.nan

def abs_activation(x):
    return abs(x)

activations = {
    "identity"          : identity_activation,
    "clamped"           : clamped_activation,
    "relu"              : relu_activation,
    "leaky_relu"        : leaky_relu_activation,
    "leaky_relu_shifted": leaky_relu_shifted_activation,
    "srelu"             : srelu_activation,
    "srelu_shifted"     : srelu_shifted_activation,
    "max_minus_one"     : max_minus_one_activation,
    "logistic"          : logistic_activation,
    "logistic_steep"    : logistic_steep_activation,
    "sigmoid"           : sigmoid_activation,
    "tanh"              : tanh_activation,
    "arctan"            : arctan_activation,
    "arcsinh"           : arcsinh_activation,
    "soft_sign_steep"   : soft_sign_steep_activation,
    "scaled_elu"        : scaled_elu_activation,
    "gaussian"          : gaussian_activation,
    "sin"               : sin_activation,
    "abs"               : abs_activation
    }

# 3-letter identifiers for each activation function
activation_codes = {
    "identity"          : "IDN",
    "clamped"           : "CLP",
    "relu"              : "RLU",
    "leaky_relu"        : "LRL",
    "leaky_relu_shifted": "LRS",
    "srelu"             : "SRL",
    "srelu_shifted"     : "SRS",
    "max_minus_one"     : "MM1",
    "logistic"          : "LGS",
    "logistic_steep"    : "LGT",
    "sigmoid"           : "SIG",
    "tanh"              : "TNH",
    "arctan"            : "ATN",
    "arcsinh"           : "ASH",
    "soft_sign_steep"   : "SSS",
    "scaled_elu"        : "SEL",
    "gaussian"          : "GAU",
    "sin"               : "SIN",
    "abs"               : "ABS"
    }
