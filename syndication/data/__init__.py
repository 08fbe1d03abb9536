# Format detection and load/save adapters
#
# Modules:
# - metadata: ContentFormat and ResourceMetadata (root element sniffing)
# - adapter: ResourceAdapter, the format-checking dispatcher
# - blogml20, apml06: Per-format structural adapters
