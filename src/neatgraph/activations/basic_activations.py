import autograd.numpy as np  # type: ignore

# exp(-z) is only evaluated inside this window, to prevent overflow
_EXP_LIMIT = 500.0

def linear_activation(z):
    return z

def sigmoid_activation(z):
    Z = np.clip(z, -_EXP_LIMIT, _EXP_LIMIT)
    return 1.0 / (1.0 + np.exp(-Z))

def signed_sigmoid_activation(z):
    Z = np.clip(z, -_EXP_LIMIT, _EXP_LIMIT)
    return 2.0 / (1.0 + np.exp(-Z)) - 1.0

def relu_activation(z):
    return np.maximum(0.0, z)

activations = {
    "linear"        : linear_activation,
    "sigmoid"       : sigmoid_activation,
    "signed_sigmoid": signed_sigmoid_activation,
    "relu"          : relu_activation
    }

# 3-letter identifiers for each activation function
activation_codes = {
    "linear"        : "LIN",
    "sigmoid"       : "SIG",
    "signed_sigmoid": "SSG",
    "relu"          : "RLU"
    }
