"""
Vectorized activation functions.

Each function here is the array counterpart of the scalar function with the
same name in 'basic_activations', operating on a whole numpy buffer at once.

Signature:
    fn(v, w=None) -> w

    v: buffer of pre-activation values
    w: buffer receiving the post-activation values; if None, 'v' is overwritten

Branching scalar functions are expressed with 'np.where' using the very same
comparisons as the scalar code, so that threshold values land on the same
side in both forms.
"""

import numpy as np

from phenonet.activations.basic_activations import (
    ARCSINH_SCALE,
    EXP_CLIP,
    LEAKY_RELU_SLOPE,
    SELU_ALPHA,
    SELU_LAMBDA,
    SHIFT_OFFSET,
    SRELU_A,
    SRELU_TL,
    SRELU_TR,
)

def _store(result, v, w):
    if w is None:
        w = v
    w[...] = result
    return w

def _clip_exp_arg(v):
    return np.clip(v, -EXP_CLIP, EXP_CLIP)

def identity_activation_vec(v, w=None):
    if w is None or w is v:
        return v
    w[...] = v
    return w

def clamped_activation_vec(v, w=None):
    return np.clip(v, -1.0, 1.0, out=v if w is None else w)

def relu_activation_vec(v, w=None):
    return _store(np.where(v > 0.0, v, 0.0), v, w)

def leaky_relu_activation_vec(v, w=None):
    return _store(np.where(v > 0.0, v, v * LEAKY_RELU_SLOPE), v, w)

def leaky_relu_shifted_activation_vec(v, w=None):
    y = v + SHIFT_OFFSET
    return _store(np.where(y < 0.0, y * LEAKY_RELU_SLOPE, y), v, w)

def srelu_activation_vec(v, w=None):
    left  = SRELU_TL + (v - SRELU_TL) * SRELU_A
    right = SRELU_TR + (v - SRELU_TR) * SRELU_A
    outer = np.where(v <= SRELU_TL, left, right)
    return _store(np.where((v > SRELU_TL) & (v < SRELU_TR), v, outer), v, w)

def srelu_shifted_activation_vec(v, w=None):
    y = v + SHIFT_OFFSET
    srelu_activation_vec(y)
    return _store(y, v, w)

def max_minus_one_activation_vec(v, w=None):
    return _store(np.where(v > -1.0, v, -1.0), v, w)

def logistic_activation_vec(v, w=None):
    return _store(1.0 / (1.0 + np.exp(-_clip_exp_arg(v))), v, w)

def logistic_steep_activation_vec(v, w=None):
    return _store(1.0 / (1.0 + np.exp(-_clip_exp_arg(4.9 * v))), v, w)

def sigmoid_activation_vec(v, w=None):
    K = 10
    return _store(1.0 / (1.0 + np.exp(-_clip_exp_arg(K * v))), v, w)

def tanh_activation_vec(v, w=None):
    return np.tanh(v, out=v if w is None else w)

def arctan_activation_vec(v, w=None):
    return _store(np.arctan(v) / np.pi + 0.5, v, w)

def arcsinh_activation_vec(v, w=None):
    return _store(ARCSINH_SCALE * ((np.arcsinh(v) + 1.0) * 0.5), v, w)

def soft_sign_steep_activation_vec(v, w=None):
    return _store(0.5 + v / (2.0 * (0.2 + np.abs(v))), v, w)

def scaled_elu_activation_vec(v, w=None):
    # exp() only ever sees the negative part, the positive branch would overflow for large inputs
    neg = SELU_LAMBDA * (SELU_ALPHA * np.exp(_clip_exp_arg(np.minimum(v, 0.0))) - SELU_ALPHA)
    return _store(np.where(v >= 0.0, SELU_LAMBDA * v, neg), v, w)

def gaussian_activation_vec(v, w=None):
    z = _clip_exp_arg(v)
    return _store(np.exp(-(z * z)), v, w)

def sin_activation_vec(v, w=None):
    return np.sin(v, out=v if w is None else w)

def abs_activation_vec(v, w=None):
    return np.abs(v, out=v if w is None else w)

activations_vec = {
    "identity"          : identity_activation_vec,
    "clamped"           : clamped_activation_vec,
    "relu"              : relu_activation_vec,
    "leaky_relu"        : leaky_relu_activation_vec,
    "leaky_relu_shifted": leaky_relu_shifted_activation_vec,
    "srelu"             : srelu_activation_vec,
    "srelu_shifted"     : srelu_shifted_activation_vec,
    "max_minus_one"     : max_minus_one_activation_vec,
    "logistic"          : logistic_activation_vec,
    "logistic_steep"    : logistic_steep_activation_vec,
    "sigmoid"           : sigmoid_activation_vec,
    "tanh"              : tanh_activation_vec,
    "arctan"            : arctan_activation_vec,
    "arcsinh"           : arcsinh_activation_vec,
    "soft_sign_steep"   : soft_sign_steep_activation_vec,
    "scaled_elu"        : scaled_elu_activation_vec,
    "gaussian"          : gaussian_activation_vec,
    "sin"               : sin_activation_vec,
    "abs"               : abs_activation_vec
    }
