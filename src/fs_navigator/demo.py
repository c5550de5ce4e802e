"""The sample tree a new session starts with.

Seeding goes through the same public operations a user would type, so
the demo can never build a tree the shell could not::

    /
    └── home/
        ├── readme.txt
        └── user/
            ├── Documents/
            │   └── report.docx
            ├── Downloads/
            └── profile.txt
"""

from fs_navigator.filesystem import FileSystem


def seed_demo(fs: FileSystem) -> None:
    """Populate *fs* with the sample tree and return to the root."""
    fs.create_directory("home")
    fs.change_directory("home")
    fs.create_directory("user")
    fs.create_file("readme.txt")
    fs.change_directory("user")
    fs.create_directory("Documents")
    fs.create_directory("Downloads")
    fs.create_file("profile.txt")
    fs.change_directory("Documents")
    fs.create_file("report.docx")
    fs.change_directory("/")
