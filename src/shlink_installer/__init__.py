"""Interactive installer for the Shlink URL shortener.

Collects configuration from the operator, writes the generated config file
and runs the database provisioning commands.
"""

__version__ = "0.1.0"
