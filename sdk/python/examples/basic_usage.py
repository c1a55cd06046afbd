#!/usr/bin/env python3
"""
Basic collabnorm usage example.

Runs the normalizer against an in-memory directory, then shows how the same
normalizer is pointed at GitHub.
Run with: python examples/basic_usage.py
"""

from collabnorm import ConfigurationError, PermissionNormalizer, Permission, Settings
from collabnorm.testing import InMemoryCollaboratorDirectory, create_mock_collaborator

print("=== collabnorm Basic Usage Example ===\n")

# 1. Permission classification
print("1. Classifying API permission flags...")
for flags in [(True, True, True), (False, True, True), (False, False, True), (False, False, False)]:
    print(f"   admin={flags[0]!s:5} push={flags[1]!s:5} pull={flags[2]!s:5} -> {Permission.from_flags(*flags).value}")

# 2. Normalizing an in-memory repository
print("\n2. Normalizing an in-memory repository...")
directory = InMemoryCollaboratorDirectory([
    create_mock_collaborator("maintainer", Permission.ADMIN),
    create_mock_collaborator("contributor", Permission.PUSH),
    create_mock_collaborator("reader", Permission.PULL),
])
result = PermissionNormalizer(directory, echo=lambda line: print(f"   {line}")).normalize()
assert directory.permission_of("contributor") is Permission.PULL
print(f"   Downgraded: {result.downgraded}")

# 3. A second run is a no-op
print("\n3. Running again...")
again = PermissionNormalizer(directory, echo=lambda line: print(f"   {line}")).normalize()
assert again.downgraded == []
print("   OK: nothing left to downgrade")

# 4. Configuration comes from the environment
print("\n4. Loading settings from an empty environment...")
try:
    Settings.from_env({})
except ConfigurationError as e:
    print(f"   Caught ConfigurationError: {e}")

print("\n   Against GitHub:")
print("       with CollabNormClient.from_env() as client:")
print("           PermissionNormalizer(client.collaborators).normalize()")
