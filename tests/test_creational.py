"""Tests for creational patterns."""
import dataclasses
import logging
import threading
import time

import pytest

from patterns import (
    Platform,
    IOSButton,
    AndroidButton,
    IOSCheckbox,
    AndroidCheckbox,
    create_button,
    UIFactoryRegistry,
    IOSUIFactory,
    AndroidUIFactory,
    get_ui_factory,
    Burger,
    BurgerBuilder,
    ShapeAttributes,
    Rectangle,
    Circle,
    clone_all,
    Singleton,
    Database
)
from utils.exceptions import (
    UnsupportedVariantError,
    AlreadyBuiltError,
    UninitializedAttributeError
)


class TestFactory:
    """Tests for the factory method."""

    @pytest.mark.parametrize("platform", list(Platform))
    def test_variant_matches_discriminant(self, platform):
        """Test every platform yields a button tagged with it."""
        button = create_button(platform, label="OK")
        assert button.platform is platform
        assert button.label == "OK"

    def test_accepts_string_tags(self):
        """Test tags are resolved case-insensitively."""
        assert isinstance(create_button("iOS"), IOSButton)
        assert isinstance(create_button(" android "), AndroidButton)

    @pytest.mark.parametrize("tag", ["windows", "", None, 42])
    def test_unknown_discriminant_raises(self, tag):
        """Test there is no silent default variant."""
        with pytest.raises(UnsupportedVariantError) as exc_info:
            create_button(tag)
        assert exc_info.value.details['available_types'] == ['ios', 'android']

    def test_buttons_render_per_platform(self):
        """Test variants render differently."""
        assert create_button(Platform.IOS, "Save").render() == "( Save )"
        assert create_button(Platform.ANDROID, "Save").render() == "[ SAVE ]"

    def test_products_are_immutable(self):
        """Test widgets are frozen value objects."""
        button = create_button(Platform.IOS, "OK")
        with pytest.raises(dataclasses.FrozenInstanceError):
            button.label = "Cancel"


class TestAbstractFactory:
    """Tests for widget families."""

    @pytest.mark.parametrize("platform", list(Platform))
    def test_family_never_mixes_platforms(self, platform):
        """Test button and checkbox come from the same platform."""
        factory = get_ui_factory(platform)
        button = factory.create_button("Submit")
        checkbox = factory.create_checkbox("Remember me")

        assert factory.platform is platform
        assert button.platform is checkbox.platform is platform

    def test_concrete_families(self):
        """Test each family produces its own variants."""
        ios = get_ui_factory("ios")
        android = get_ui_factory("android")

        assert isinstance(ios, IOSUIFactory)
        assert isinstance(android, AndroidUIFactory)
        assert isinstance(ios.create_checkbox(), IOSCheckbox)
        assert isinstance(android.create_checkbox(), AndroidCheckbox)

    def test_unknown_family_raises(self):
        """Test unknown platforms are rejected."""
        with pytest.raises(UnsupportedVariantError):
            get_ui_factory("symbian")

    def test_registry(self):
        """Test the registry lists and creates families by name."""
        assert UIFactoryRegistry.list_available() == ['android', 'ios']
        assert isinstance(UIFactoryRegistry.create('ios'), IOSUIFactory)

        with pytest.raises(UnsupportedVariantError) as exc_info:
            UIFactoryRegistry.create('symbian')
        assert exc_info.value.details['available_types'] == ['android', 'ios']

    def test_checkbox_toggle(self):
        """Test toggling returns a new checkbox of the same variant."""
        checkbox = get_ui_factory(Platform.ANDROID).create_checkbox("Wi-Fi")
        toggled = checkbox.toggle()

        assert toggled.checked is True
        assert checkbox.checked is False
        assert isinstance(toggled, AndroidCheckbox)
        assert toggled.render() == "[x] Wi-Fi"


class TestBuilder:
    """Tests for the burger builder."""

    def test_chained_build(self):
        """Test fluent construction sets exactly the chosen parts."""
        burger = BurgerBuilder().buns('sesame').patty('fish-patty').sauce('secret-sauce').build()

        assert burger.buns == 'sesame'
        assert burger.patty == 'fish-patty'
        assert burger.sauce == 'secret-sauce'
        assert burger.cheese is None
        assert burger.ingredients == ('sesame', 'fish-patty', 'secret-sauce')

    def test_setters_return_same_builder(self):
        """Test each setter returns the builder itself."""
        builder = BurgerBuilder()
        assert builder.buns('brioche') is builder
        assert builder.cheese('cheddar') is builder

    def test_last_value_wins(self):
        """Test setting a part twice keeps the last value."""
        burger = BurgerBuilder().patty('beef').patty('veggie').build()
        assert burger.patty == 'veggie'
        assert burger.ingredients == ('veggie',)

    def test_order_independent(self):
        """Test chain order does not affect the result."""
        first = BurgerBuilder().buns('sesame').cheese('swiss').sauce('bbq').build()
        second = BurgerBuilder().sauce('bbq').buns('sesame').cheese('swiss').build()
        assert first == second

    def test_empty_build_uses_defaults(self):
        """Test unset parts keep their default."""
        burger = BurgerBuilder().build()
        assert burger == Burger()
        assert burger.ingredients == ()

    def test_second_build_raises(self):
        """Test a finalized builder cannot build again."""
        builder = BurgerBuilder().buns('plain')
        builder.build()

        assert builder.built
        with pytest.raises(AlreadyBuiltError):
            builder.build()

    def test_setter_after_build_raises(self):
        """Test a finalized builder rejects further parts."""
        builder = BurgerBuilder()
        burger = builder.buns('plain').build()

        with pytest.raises(AlreadyBuiltError):
            builder.cheese('gouda')
        assert burger.cheese is None

    def test_reset_rearms_builder(self):
        """Test reset discards state and allows another build."""
        builder = BurgerBuilder()
        builder.buns('plain').build()
        burger = builder.reset().patty('chicken').build()

        assert burger == Burger(patty='chicken')

    def test_burger_is_immutable(self):
        """Test built burgers cannot be changed."""
        burger = BurgerBuilder().buns('plain').build()
        with pytest.raises(dataclasses.FrozenInstanceError):
            burger.buns = 'sesame'


class TestPrototype:
    """Tests for clonable shapes."""

    def _rectangle(self):
        return Rectangle(width=10, height=20, common=ShapeAttributes(x=1, y=2, color='red'))

    def test_clone_fidelity(self):
        """Test a clone carries every attribute of its source."""
        rect1 = self._rectangle()
        rect2 = rect1.clone()

        assert rect2 == rect1
        assert rect2 is not rect1
        assert (rect2.x, rect2.y, rect2.color) == (1, 2, 'red')
        assert (rect2.width, rect2.height) == (10, 20)

    def test_clone_independence(self):
        """Test mutating a clone leaves the source untouched."""
        rect1 = self._rectangle()
        rect2 = rect1.clone()
        rect2.width = 99
        rect2.x = 50
        rect2.color = 'blue'

        assert rect1.width == 10
        assert rect1.x == 1
        assert rect1.color == 'red'

    def test_source_mutation_does_not_leak(self):
        """Test mutating the source after cloning leaves the clone untouched."""
        circle = Circle(radius=3, common=ShapeAttributes(x=0, y=0, color='green'))
        copy = circle.clone()
        circle.radius = 7
        circle.y = 9

        assert copy.radius == 3
        assert copy.y == 0
        assert copy.common is not circle.common

    def test_clone_keeps_unset_attributes_unset(self):
        """Test unset attributes stay unset in the clone."""
        copy = Circle().clone()
        assert copy.x is None
        assert copy.radius is None

    def test_area_requires_dimensions(self):
        """Test reading an unset dimension raises."""
        with pytest.raises(UninitializedAttributeError) as exc_info:
            Rectangle(width=3).area()
        assert exc_info.value.details['attribute'] == 'height'
        assert Rectangle(width=3, height=4).area() == 12
        assert Circle(radius=1).area() == pytest.approx(3.141592653589793)

    def test_clone_all_preserves_variants(self):
        """Test a mixed collection is copied variant by variant."""
        shapes = [self._rectangle(), Circle(radius=5)]
        copies = clone_all(shapes)

        assert [type(shape) for shape in copies] == [Rectangle, Circle]
        assert copies == shapes
        assert all(copy is not shape for copy, shape in zip(copies, shapes))


class TestSingleton:
    """Tests for the singleton database."""

    def test_same_instance(self):
        """Test the access point always returns one instance."""
        assert Database.get_instance() is Database.get_instance()
        assert Database() is Database.get_instance()

    def test_shared_state(self):
        """Test queries land in the one shared history."""
        db = Database.get_instance()
        before = len(db.history)
        Database.get_instance().query("SELECT 1")

        assert len(db.history) == before + 1
        assert db.history[-1] == "SELECT 1"

    def test_concurrent_first_access_constructs_once(self):
        """Test racing first calls construct exactly one instance."""
        constructions = []

        class CountingDatabase(Database):
            def __init__(self):
                constructions.append(threading.get_ident())
                time.sleep(0.01)
                super().__init__()

        workers = 16
        barrier = threading.Barrier(workers)
        results = []
        results_lock = threading.Lock()

        def access():
            barrier.wait()
            instance = CountingDatabase.get_instance()
            with results_lock:
                results.append(instance)

        threads = [threading.Thread(target=access) for _ in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(constructions) == 1
        assert len(results) == workers
        assert all(instance is results[0] for instance in results)

    def test_one_instance_per_class(self):
        """Test unrelated singleton classes do not share an instance."""
        class Settings(Singleton):
            pass

        assert not Settings.has_instance()
        assert Settings() is Settings()
        assert Settings.has_instance()
        assert Settings() is not Database.get_instance()

    def test_constructor_may_access_another_singleton(self):
        """Test first construction can reach a second singleton without deadlocking."""
        class Registry(Singleton):
            pass

        class Service(Singleton):
            def __init__(self):
                self.registry = Registry.get_instance()

        result = []
        worker = threading.Thread(target=lambda: result.append(Service.get_instance()))
        worker.start()
        worker.join(timeout=5)

        assert not worker.is_alive()
        assert result[0].registry is Registry.get_instance()

    def test_creation_is_logged(self, caplog):
        """Test the first construction is logged once."""
        class AuditLog(Singleton):
            pass

        with caplog.at_level(logging.INFO, logger='patterns.singleton'):
            AuditLog()
            AuditLog()

        messages = [r.getMessage() for r in caplog.records if r.name == 'patterns.singleton']
        assert messages == ["Created singleton instance of AuditLog"]
