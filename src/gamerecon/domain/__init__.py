"""Pure reconciliation domain: records, regions and the partition pipeline."""
