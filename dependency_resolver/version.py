"""Version information."""

__version__ = "1.0.0"
__version_info__ = (1, 0, 0)

# Version history
CHANGELOG = """
# Changelog

## v1.0.0

**Dependency Resolution**

- ✅ "A depends on B C" declaration files
- ✅ Transitive closure in first-discovery order
- ✅ Cycle-safe traversal
- ✅ Special characters in library names
- ✅ Redeclaration policy (ignore / warn / fail)

**CLI**

- ✅ Text, JSON and table output
- ✅ --dependents reverse lookup
- ✅ --export to JSON
- ✅ Colored output

### Known Limitations

- ❌ No version constraints or conflict resolution
"""
