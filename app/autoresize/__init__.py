"""autoresize - batch candidate selection for image auto-resizing.

Expands watched directory specs, removes overlapping roots, walks the
remaining trees and hands every recognized image file to a resizer
collaborator exactly once per run.
"""

__version__ = "0.4.0"
