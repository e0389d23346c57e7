"""Application layer: business services that mutate the record store and trigger the projection sync."""
