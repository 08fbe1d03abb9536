# BlogML 2.0 entities
#
# Modules:
# - utility: Namespace constants
# - enums: Approval status, content type, post type
# - text: Text constructs
# - common: Shared id/title/date/approval fields and their adapter
# - author, category, trackback, attachment, comment, post: Leaf entities
# - document: BlogMLDocument resource
