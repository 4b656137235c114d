"""Real-time voice assistant relay (browser audio -> STT -> LLM -> TTS -> browser)."""
