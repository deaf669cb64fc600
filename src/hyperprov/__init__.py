"""HyperShift PowerVS provisioner (hyperprov).

Bootstrap a managing cluster and fan out hosted control plane creation across PowerVS zones.
"""

__version__ = "0.1.0"
__author__ = "Platform Engineering Team"
__license__ = "Apache-2.0"
