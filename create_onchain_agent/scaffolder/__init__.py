"""Project assembly -- turns a ``Selection`` into a generated source tree.

Quick usage::

    from create_onchain_agent.registry import Selection
    from create_onchain_agent.scaffolder import ProjectAssembler

    selection = Selection(
        project_name="my-agent",
        network="base-sepolia",
        framework="Langchain",
        model_provider="Anthropic",
    )
    assembler = ProjectAssembler()
    project_path = await assembler.assemble(selection)
"""

from create_onchain_agent.scaffolder.assembler import ProjectAssembler
from create_onchain_agent.scaffolder.fragments import FragmentGenerator
from create_onchain_agent.scaffolder.templates import TemplateRenderer

__all__ = [
    "FragmentGenerator",
    "ProjectAssembler",
    "TemplateRenderer",
]
