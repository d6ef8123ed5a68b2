from myfriend.core.capture_flow import ImageSource


# --- Fake ports for the capture flow ------------------------------------------
class FakeChooser:
    """ Source sheet with the answer preselected. None means the sheet was dismissed. """

    def __init__(self, answer=ImageSource.LIBRARY):
        self.answer = answer
        self.offered = []

    def choose_source(self, available):
        self.offered.append(tuple(available))
        return self.answer


class FakeProvider:
    """ Picker returning a fixed image. None means the picker was dismissed. """

    def __init__(self, image=None, sources=(ImageSource.CAMERA, ImageSource.LIBRARY)):
        self.image = image
        self.sources = tuple(sources)
        self.requests = []

    def available_sources(self):
        return self.sources

    def request_image(self, source):
        self.requests.append(source)
        return self.image


class FakeCaptions:
    """ Caption dialog answering from a list, in order. """

    def __init__(self, *answers):
        self._answers = list(answers)
        self.prompts = []

    def request_caption(self, title, message):
        self.prompts.append((title, message))
        return self._answers.pop(0)
