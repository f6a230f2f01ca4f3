"""Token primitives: base64url codec, JSON serializer, HMAC signer, encoder and verifier."""
