# protobom

`protobom` holds Software Bill of Materials data in one neutral model,
whatever format it came from. Packages and files are **nodes**; the
relationships between them are typed **edges**. A group of nodes and edges,
together with the IDs of its top-level ("root") elements, is a
**node list**. A node list with document metadata is a **document**.

The package uses only the Python standard library and needs Python 3.10 or
later.

## Installation

```
pip install protobom
```

To run the test suite:

```
pip install "protobom[test]"
pytest
```

## What is in the package

| Module | Contents |
| --- | --- |
| `protobom.enums` | `NodeType`, `EdgeType`, `HashAlgorithm`, `SoftwareIdentifierType`, `Purpose` and `ExternalReferenceType`, with conversions to and from SPDX 2, SPDX 3 and CycloneDX labels (`EdgeType.to_spdx2`, `edge_type_from_spdx2`, `edge_type_from_spdx`, `HashAlgorithm.to_spdx`, `HashAlgorithm.to_spdx3`, `hash_algorithm_from_spdx`, `hash_algorithm_from_cdx`, `software_identifier_type_from_string`, and others) |
| `protobom.person` | `Person`, a supplier, originator or author |
| `protobom.externalreference` | `ExternalReference` |
| `protobom.edge` | `Edge`, a typed relationship from one node to one or more others |
| `protobom.node` | `Node`, and `new_node_identifier()` for IDs that SPDX and CycloneDX both accept |
| `protobom.nodelist` | `NodeList` with union, intersection, adding, removing, relating and matching of nodes; `MoreThanOneMatchError`, `NodeNotFoundError` |
| `protobom.diff` | `diff_nodes` and the `NodeDiff` it returns, plus the value helpers `diff_value`, `diff_slice`, `diff_list`, `diff_map`, `diff_dates` |
| `protobom.document` | `Document`, `Metadata`, `Tool` and `new_document()` |
| `protobom.storage.base` | The `Backend` interface, `StoreOptions`, `RetrieveOptions` and a programmable `FakeBackend` for tests |
| `protobom.storage.filesystem` | `FileSystem`, a backend that keeps documents in a directory; `StorageError`; `generate_doc_filename` |
| `protobom.writer.options` | `WriterOptions`, `RenderOptions`, `SerializeOptions` |
| `protobom.writer.writer` | `Writer`, the `Serializer` interface, the serializer registry and `WriterError` |

## Building a graph

```python
from protobom.enums import EdgeType
from protobom.node import Node
from protobom.nodelist import NodeList

nodes = NodeList()
nodes.add_root_node(Node(id="my-app"))

# Relating a node adds it to the list if it is not there yet.
nodes.relate_node_at_id(Node(id="libfoo"), "my-app", EdgeType.DEPENDS_ON)

print([node.id for node in nodes.get_root_nodes()])   # ['my-app']
```

`add_root_node` ignores nodes without an ID and IDs that are already roots.
`relate_node_at_id` raises `NodeNotFoundError` when the node to relate from
is not in the list.

### Combining node lists

* `a.union(b)` returns a new list with the nodes of both. Nodes of `a` are
  copied; where `b` holds a node with the same ID, its non-empty values
  overwrite those of the copy.
* `a.intersect(b)` returns a new list with only the nodes both share, copied
  from `a` and updated with the data from `b`.
* `a.add(b)` merges `b` into `a` in place; nodes already in `a` only have
  their empty fields filled.
* `a.relate_node_list_at_id(b, node_id, edge_type)` relates the roots of `b`
  from the node `node_id` of `a` and merges in the nodes and edges of `b`.
* `a.remove_nodes(ids)` drops nodes and the edges that touch them.

After these operations (except `relate_node_list_at_id`) edges are cleaned:
destinations that are not in the list are dropped, edges whose source is
missing are removed, and edges of the same type from the same node are
merged into one. `clean_edges()` does this on demand.

### Finding nodes

* `get_node_by_id`, `get_nodes_by_name`, `get_root_nodes` and
  `get_edge_by_type` do what their names say.
* `get_nodes_by_identifier("purl", "pkg:generic/libfoo@1.0")` matches on a
  software identifier. The type may be an SPDX external reference type such
  as `purl` or `cpe23Type`, or a short name such as `cpe23` or `cpe2.2`.
* `get_matching_node(node)` finds the single node that describes the same
  software, first by hashes and then by package URL. It returns `None` when
  nothing matches and raises `MoreThanOneMatchError` when the match is
  ambiguous.
* `index_nodes_by_hash()` and `index_nodes_by_purl()` return the indexes
  these lookups use.

## Comparing nodes

`diff_nodes(old, new)` returns `None` when two nodes carry the same data.
Otherwise it returns a `NodeDiff` whose `added` node holds the values `new`
introduced or changed, whose `removed` node holds the values `new` dropped,
and whose `diff_count` is the number of fields that differ. Dates are
compared to the second.

`Node.equal` and `NodeList.equal` compare contents regardless of the order
of list items. `Node.checksum()` is the SHA-256 hex digest of
`Node.flat_string()`.

## Documents and storage

`new_document()` returns an empty `Document` whose metadata has version
`"0"` and whose node list is empty.

`FileSystem(path=...)` stores each document as a JSON file in its directory,
creating the directory if needed. The file name is the SHA-256 of the
document ID plus `.protobom` (see `generate_doc_filename`); a document
without an ID cannot be stored. `retrieve(document_id)` reads it back.
With `StoreOptions(no_clobber=True)` an existing entry is not overwritten.
Failures are raised as `StorageError`.

## Writing documents

A `Writer` turns a document into a native format with a `Serializer`
registered per format name:

```python
from protobom.writer.writer import Writer, register_serializer

register_serializer("my-format", my_serializer)
writer = Writer(format="my-format")
with open("out.json", "wb") as stream:
    writer.write_stream(document, stream)
```

`Writer` takes the keyword arguments `format`, `render_options`,
`serialize_options`, `store_options`, `format_options` and `storage`.
Render options default to an indent of 4. `write_stream` and `write_file`
use the writer's own `WriterOptions`; the `*_with_options` variants take an
options set, falling back to the writer's format when theirs is empty.
`store` and `store_with_options` hand a document to the storage backend,
which is a `FileSystem` with no path unless another is given; set its
`path` before storing. Errors such as an unknown format, a missing document
or a failing serializer or backend are raised as `WriterError`.

## What the package does not do

* It includes no serializers: nothing is registered for SPDX or CycloneDX
  out of the box, and a `Writer` can only write formats whose `Serializer`
  you register yourself.
* It cannot read SBOMs in SPDX, CycloneDX or any other native format; node
  lists are built in code or loaded from a `FileSystem` backend.
* It has no functions that walk the graph from a node, such as collecting a
  node's descendants or everything reachable from it.
* It has no command-line tool.