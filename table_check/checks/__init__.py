"""Template checks: comment stripping, region extraction, tag scanning and rules."""
