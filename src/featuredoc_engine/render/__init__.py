"""Render module: Markdown blocks for the README's generated sections."""

from featuredoc_engine.render.blocks import (
    policy_keys,
    render_flattened_list,
    render_near_table,
    render_policy_matrix,
)

__all__ = [
    "policy_keys",
    "render_flattened_list",
    "render_near_table",
    "render_policy_matrix",
]
