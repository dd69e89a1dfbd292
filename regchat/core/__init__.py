"""Domain core: error taxonomy and the retrieval-augmented chat pipeline."""
