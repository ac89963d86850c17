"""
    Application configuration — prompts, root folder, history depth.

    Provides a typed configuration object shared by the demo driver,
    the interactive shell and the command processor.
"""
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class PromptConfig:
    """
    Text written before each line read.

    Attributes:
        child_name:  Prompt used by the add-child command.
        new_name:    Prompt used by the rename command.
        shell:       Prompt printed before each interactive shell line.
    """
    child_name: str = "Enter folder name: "
    new_name: str = "Enter new name: "
    shell: str = "> "


@dataclass
class AppConfig:
    """
    Top-level configuration.

    Attributes:
        prompts:            Prompt texts.
        root_name:          Name given to the root folder at start-up.
        max_history_depth:  Upper bound on recorded commands.  ``None``
                            keeps every command (oldest dropped first
                            when a bound is set).
    """
    prompts: PromptConfig = field(default_factory=PromptConfig)
    root_name: str = "tmp"
    max_history_depth: Optional[int] = None
