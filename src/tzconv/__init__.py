"""
tzconv core package.

Parses date/time strings of loosely specified format, resolves the timezone
they were written in, and re-expresses them in another timezone:
- Datetime parsing with ordered pattern fallback (`tzconv.parsing`)
- Timezone abbreviation database and offset resolution (`tzconv.timezones`)
- Conversion and display formatting (`tzconv.convert`)
- A Typer-based CLI (`tzconv.cli`)

Configuration:
- Shared, project-wide defaults live in `tzconv.global_config`.
- Per-run settings (verbosity, clock, forced source zone) travel in a
  `tzconv.context.ParseContext` passed through every core call.
"""
