"""Source text of generated namespace modules."""

from __future__ import annotations

from nsbuild.model import Namespace


def render_alias_file(namespace: Namespace) -> str:
    """Re-export every direct member under its short name, in member order."""
    return "".join(f"module {member.name} = {member.module_name}\n" for member in namespace.members)


def render_namespace_file(namespace: Namespace, digest: str) -> str:
    """Render the namespace root module.

    The digest is embedded in a comment so that a change anywhere in the
    namespace's dependency closure is a real content change of this file.
    """
    return f"(* {namespace.module_name} {digest} *)\n" + render_alias_file(namespace)
