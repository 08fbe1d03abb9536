# Common building blocks shared by every format
#
# Modules:
# - guard: Argument validation
# - enumeration: Enum <-> wire token tables
# - comparison: Field-wise comparison and equality
# - dates: RFC 3339 / RFC 822 timestamps
# - xml: XmlNavigator and XmlWriter
# - settings: LoadSettings and SaveSettings
