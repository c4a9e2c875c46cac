"""create-onchain-agent -- generator for onchain AI agent projects.

Resolves a user's choice of network, wallet provider, framework, template and
model provider against static compatibility tables, then assembles a project
from the matching template tree.
"""

__version__ = "0.1.0"
