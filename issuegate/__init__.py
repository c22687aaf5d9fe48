# Pull request policy gate backed by Jira ticket metadata

__version__ = "0.1.0"

__all__ = ["__version__"]
