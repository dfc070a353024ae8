"""Exceptions raised while deploying the Crypto Devs DAO."""


class DeploymentError(Exception):
    """Raised when a deployment cannot be completed."""


class ConfigurationError(DeploymentError, ValueError):
    """Raised when the deployment is misconfigured before anything is sent."""
