"""Binary trees and binary search trees of integers (bstree.tree) and a text menu (bstree.menu)."""

__version__ = "0.1.0"