"""kubelens - live terminal overview of Kubernetes resources."""

__version__ = "0.1.0"
