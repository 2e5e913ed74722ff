"""cronexpand - expand cron expressions into the values they match."""

__version__ = "0.1.0"
