"""Tests for ApplicationModel - UI state container."""
from embedlab_ui.core.ApplicationModel import ApplicationModel, VIEWS


class TestApplicationModel:

    def test_defaults(self):
        model = ApplicationModel()

        assert model.view == "home"
        assert model.fullscreen is False
        assert model.running is True
        assert model.simulation_interval == 0.0

    def test_default_view_is_known(self):
        assert ApplicationModel().view in VIEWS

    def test_loop_history_is_bounded(self):
        model = ApplicationModel()

        for i in range(500):
            model.loop_history.append(float(i))

        assert len(model.loop_history) == 300
        assert model.loop_history[0] == 200.0

    def test_instances_do_not_share_history(self):
        first = ApplicationModel()
        second = ApplicationModel()

        first.loop_history.append(1.0)

        assert len(second.loop_history) == 0
