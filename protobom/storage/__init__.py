"""Storage backends that persist and retrieve SBOM documents."""