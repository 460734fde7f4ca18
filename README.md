# sculk

Read uncompressed binary NBT and turn Minecraft block entity compounds
into plain Python dataclasses. Standard library only.

## Installation

```
pip install sculk
```

## Reading and writing NBT

`sculk.nbt` reads and writes uncompressed, big-endian (Java edition) NBT.

```python
from sculk.nbt import read_nbt, write_nbt

compound = read_nbt(data)          # a Compound, or None if the root is an end tag
items = compound.get_list("Items") # an NbtList, or None
raw = write_nbt(compound, "")      # bytes, with the given root name
```

A `Compound` is a `dict` of names to `Tag(type, value)` objects. Typed
accessors such as `get_int`, `get_string`, `get_compound`, `get_list` and
`get_int_array` return the value, or `None` when the name is absent or
holds another tag type. `NbtList.compounds()` and `NbtList.strings()`
return the elements, or `None` if the list holds another type.

Gzipped files (such as `level.dat`) must be decompressed first, for
example with `gzip.decompress`.

Building a compound by hand:

```python
from sculk.nbt import Compound, Tag, TagType

nbt = Compound({"OutputSignal": Tag(TagType.INT, 7)})
```

## Parsing block entities

Every parser is a `from_compound(nbt)` class method taking the block
entity's `Compound`. The parsers do not look at the `id` field; pick the
class that matches the block.

```python
from sculk.nbt import read_nbt
from sculk.block_entities.processing import Furnace

furnace = Furnace.from_compound(read_nbt(data))
print(furnace.burn_time, furnace.recipes_used)
```

Modules in `sculk.block_entities`:

- `containers`: `Barrel`, `Chest`, `Dispenser`, `Dropper`, `Hopper`
  (all built on `LootContainer`)
- `processing`: `BrewingStand`, `Furnace`, `Campfire`
- `ambient`: `Beehive`, `Conduit`, `EnchantingTable`
- `sensors`: `CalibratedSculkSensor`, `SculkSensor`, `SculkShrieker`,
  `SculkCatalyst`, with `Listener`, `Selector`, `Event` and `Cursor`
- `decorative`: `Banner`, `Beacon`, `EndGateway` (`ExitPortal`),
  `Sign` (`SignText`)
- `redstone`: `CommandBlock`, `Comparator`, `Piston` (`PistonBlockState`,
  `Facing`), `StructureBlock` (`StructureBlockMirror`,
  `StructureBlockMode`, `StructureBlockRotation`)
- `spawners`: `MobSpawner`, `SpawnData`, `PotentialSpawn`, `SpawnRules`,
  `Equipment`, `DropChances` and `parse_drop_chances`
- `skull`: `Skull`, `Profile`, `Property`, `parse_skull_profile` and
  `parse_component_skull_profile`
- `jigsaw`: `Jigsaw`, `JigsawJoint`

Nested data the package does not model further (item stacks, bees,
banner patterns, spawned entities, catalyst facings) is kept as raw
`Compound` objects. UUIDs stored as four-integer arrays become
`uuid.UUID` values.

`sculk.fields` holds the helpers the parsers share, such as `required`,
`get_bool`, `get_compound_list`, `get_loot_table_data`, `uuid_from_ints`
and `get_uuid`.

## Errors

Every parsing failure raises a subclass of `sculk.errors.SculkParseError`:

- `MissingFieldError`: a required field is absent or has the wrong type
- `InvalidFieldError`: a field is present but unusable
- `NoNbtError`: there is no root compound
- `NbtError`: the binary data is malformed or cannot be encoded
- `UnsupportedBlockEntityError`: an unknown block entity id

## What it does not do

- There is no single entry point that reads a block entity's `id`,
  `x`/`y`/`z` and `components` and picks the matching parser; callers
  choose the class themselves.
- There are no parsers for shulker boxes, crafters, decorated pots,
  chiseled bookshelves, suspicious sand and gravel, lecterns, jukeboxes,
  trial spawners or vaults.
- It does not read region (`.mca`) files or chunks, and does not
  decompress gzip or zlib data.

## Running the tests

```
pip install -e ".[test]"
pytest
```