"""cert-manager DNS-01 webhook solver backed by Linode DNS."""

__version__ = "0.1.0"
