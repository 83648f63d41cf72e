"""Services for git-repo-info."""
