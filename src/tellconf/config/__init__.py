# topmark:header:start
#
#   project      : TellConf
#   file         : __init__.py
#   file_relpath : src/tellconf/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TellConf configuration: formatting options, TOML loading, and logging.

Submodules are imported explicitly (``tellconf.config.model``,
``tellconf.config.logging``) because `tellconf.core` depends on the logging
module while the configuration model depends on `tellconf.core`.
"""
