"""Read binary NBT and parse Minecraft block entity compounds into dataclasses."""

__version__ = "0.1.0"