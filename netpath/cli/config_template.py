"""
Template written by `netpath init`
"""

DEFAULT_CONFIG_FILENAME = 'netpath.yaml'

MINIMAL_CONFIG_TEMPLATE = """# netpath scenario file
#
# Nodes get their index from their position in the list (first node is 0).
# Edges are undirected; [a, b] and [b, a] describe the same connection.
# Values may reference environment variables: ${VAR}, $VAR or ${VAR:-default}

name: shortcut
description: Five nodes on a diagonal chain with a direct link from the first to the last

graph:
  capacity: 1000
  edge_capacity: 1000

nodes:
  - [0.0, 0.0]
  - [1.0, 1.0]
  - [2.0, 2.0]
  - [3.0, 3.0]
  - {x: 4.0, y: 4.0}

edges:
  - [0, 1]
  - [1, 2]
  - [2, 3]
  - [3, 4]
  - [0, 4]

search:
  start: 0
  goal: 4
  heuristic: euclidean      # euclidean, manhattan or zero

output:
  directory: netpath_results
  formats: [json]           # json, csv, parquet
  file_prefix: path

logging:
  level: INFO
"""
