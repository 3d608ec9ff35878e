# domain/geometry/hooks.py


class NoopHooks:
    def search_start(self, **_):
        pass

    def improved(self, **_):
        pass

    def step_halved(self, **_):
        pass

    def search_end(self, **_):
        pass

    def error(self, **_):
        pass
