"""git-aiadd - git add with a toggleable AI development mode"""

__version__ = "1.0.0"
