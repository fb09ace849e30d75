"""Writing SBOM documents through registered serializers and storing them."""