#!/usr/bin/env python3
"""
gitwarden - Complete Repository Workflow Example

This example demonstrates the full repository lifecycle:
1. Create a public repository
2. Grant and revoke access
3. Read branches, trees and files
4. Rename and remove the repository

Needs a running MongoDB (GITWARDEN_DATABASE_URL) and git on the PATH.
"""

import logging
import os
import random
import string
import sys
import tempfile

from gitwarden import Config, GitWarden, configure_logging
from gitwarden.exceptions import ConflictError, GitWardenError


def generate_random_suffix(length: int = 6) -> str:
    """Generate a random alphanumeric suffix."""
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=length))


def main() -> None:
    """Run the complete repository workflow example."""
    print("=== gitwarden Example ===\n")

    configure_logging(level=logging.INFO)

    # Configuration
    config = Config.from_env()
    if "GITWARDEN_BARE_LOCATION" not in os.environ:
        config.bare_location = tempfile.mkdtemp(prefix="gitwarden-")
    repo_name = f"my-awesome-project-{generate_random_suffix()}"

    with GitWarden.from_config(config) as warden:
        try:
            # Step 1: Create repository
            print("1. Creating repository...")
            try:
                repo = warden.repos.create(repo_name, ["alice"], is_public=True)
            except ConflictError:
                repo_name = f"my-awesome-project-{generate_random_suffix()}"
                repo = warden.repos.create(repo_name, ["alice"], is_public=True)
            projection = repo.to_json(config)
            print(f"   Name: {projection['name']}")
            print(f"   Read-only URL: {projection['git_url']}")
            print(f"   Read-write URL: {projection['ssh_url']}")

            # Step 2: Grant access
            print("\n2. Granting access to bob and carol...")
            warden.access.grant_access([repo_name], ["bob", "carol"])
            print(f"   Users: {', '.join(warden.repos.get(repo_name).users)}")

            # Step 3: Revoke access
            print("\n3. Revoking access from carol...")
            warden.access.revoke_access([repo_name], ["carol"])
            print(f"   Users: {', '.join(warden.repos.get(repo_name).users)}")

            # Step 4: Read refs (a fresh repository has none)
            print("\n4. Listing branches...")
            branches = warden.content.get_branch(repo_name)
            print(f"   Found {len(branches)} branch(es)")
            for branch in branches:
                print(f"   - {branch.name} {branch.ref[:8]} {branch.subject}")

            # Step 5: Rename
            new_name = f"{repo_name}-v2"
            print(f"\n5. Renaming to {new_name}...")
            warden.repos.rename(repo_name, new_name)
            repo_name = new_name
            print(f"   Exists: {warden.repos.exists(repo_name)}")

            # Step 6: Remove
            print("\n6. Removing repository...")
            warden.repos.remove(repo_name)
            print(f"   Exists: {warden.repos.exists(repo_name)}")

            print("\n=== Workflow Complete ===")

        except GitWardenError as e:
            print(f"\nError: [{e.code}] {e.message}")
            sys.exit(1)


if __name__ == "__main__":
    main()
