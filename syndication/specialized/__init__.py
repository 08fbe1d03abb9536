# Concrete syndication formats
#
# Packages:
# - blogml: BlogML 2.0 weblog export documents
# - apml: APML 0.6 attention profiles
