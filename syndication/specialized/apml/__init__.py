# APML 0.6 entities
#
# Modules:
# - utility: Namespace constants
# - attention: Key/value/from/updated fields shared by concepts, sources and authors
# - head, concept, author, source, profile, application: Entities
# - document: ApmlDocument resource
