"""MI Coach: motivational-interviewing practice backend."""
