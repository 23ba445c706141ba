"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by threadmatch.registry.discover().

The explicit imports below keep these modules in a frozen binary, where
pkgutil.iter_modules cannot find them at runtime.
"""

# Keep this list in sync with command modules
import threadmatch.commands.convert as _convert  # noqa: F401
import threadmatch.commands.distance as _distance  # noqa: F401
import threadmatch.commands.harmony as _harmony  # noqa: F401
import threadmatch.commands.match as _match  # noqa: F401
import threadmatch.commands.reduce as _reduce  # noqa: F401
import threadmatch.commands.threads as _threads  # noqa: F401
