"""talos — run versioned, locally registered command pipelines.

A registry document describes every version of a logical command as an
ordered list of steps.  talos picks a version, reconciles the caller's
trailing arguments against each step, prompts for anything missing, and
runs the steps one after another.
"""

from talos.version import __version__

__all__: list[str] = ["__version__"]
