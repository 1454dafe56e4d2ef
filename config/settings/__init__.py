# Settings are split per environment: base, local, test
