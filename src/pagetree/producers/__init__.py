"""Element-kind producers for the pagetree parser."""

from pagetree.producers.bullets import BulletListProducer
from pagetree.producers.button import ButtonProducer
from pagetree.producers.form import (
    CheckboxProducer,
    InputProducer,
    SelectBoxProducer,
    TextAreaProducer,
)
from pagetree.producers.interactive import (
    CountdownProducer,
    ProgressBarProducer,
    VideoPopupProducer,
)
from pagetree.producers.layout import (
    ColumnInnerProducer,
    ColumnProducer,
    ContentNodeProducer,
    FlexProducer,
    RowProducer,
    SectionProducer,
)
from pagetree.producers.media import (
    DividerProducer,
    IconProducer,
    ImageProducer,
    VideoProducer,
)
from pagetree.producers.placeholders import (
    CheckoutPlaceholderProducer,
    ConfirmationPlaceholderProducer,
    OrderSummaryPlaceholderProducer,
)
from pagetree.producers.popup import ModalProducer
from pagetree.producers.text import TextProducer

__all__ = [
    "ContentNodeProducer",
    "SectionProducer",
    "RowProducer",
    "ColumnProducer",
    "ColumnInnerProducer",
    "FlexProducer",
    "TextProducer",
    "ButtonProducer",
    "ImageProducer",
    "IconProducer",
    "VideoProducer",
    "DividerProducer",
    "InputProducer",
    "TextAreaProducer",
    "SelectBoxProducer",
    "CheckboxProducer",
    "BulletListProducer",
    "ProgressBarProducer",
    "VideoPopupProducer",
    "CountdownProducer",
    "CheckoutPlaceholderProducer",
    "OrderSummaryPlaceholderProducer",
    "ConfirmationPlaceholderProducer",
    "ModalProducer",
    "create_default_registry",
]


def create_default_registry() -> "ProducerRegistry":
    """Create a ProducerRegistry with a producer registered for every known kind.

    Returns:
        A fully configured ProducerRegistry.
    """
    from pagetree.engine.registry import ProducerRegistry

    registry = ProducerRegistry()

    # Layout
    registry.register("ContentNode", ContentNodeProducer())
    registry.register("SectionContainer/V1", SectionProducer())
    registry.register("RowContainer/V1", RowProducer())
    registry.register("ColContainer/V1", ColumnProducer())
    registry.register("ColInner/V1", ColumnInnerProducer())
    registry.register("FlexContainer/V1", FlexProducer())

    # Text
    registry.register("Headline/V1", TextProducer("Headline/V1", ".elHeadline"))
    registry.register("SubHeadline/V1", TextProducer("SubHeadline/V1", ".elSubheadline"))
    registry.register("Paragraph/V1", TextProducer("Paragraph/V1", ".elParagraph"))

    # Actions and media
    registry.register("Button/V1", ButtonProducer())
    registry.register("Image/V2", ImageProducer())
    registry.register("Icon/V1", IconProducer())
    registry.register("Video/V1", VideoProducer())
    registry.register("Divider/V1", DividerProducer())

    # Forms
    registry.register("Input/V1", InputProducer())
    registry.register("TextArea/V1", TextAreaProducer())
    registry.register("SelectBox/V1", SelectBoxProducer())
    registry.register("Checkbox/V1", CheckboxProducer())

    # Lists and interactive widgets
    registry.register("BulletList/V1", BulletListProducer())
    registry.register("ProgressBar/V1", ProgressBarProducer())
    registry.register("VideoPopup/V1", VideoPopupProducer())
    registry.register("Countdown/V1", CountdownProducer())

    # Commerce placeholders
    registry.register("CheckoutPlaceholder", CheckoutPlaceholderProducer())
    registry.register("OrderSummaryPlaceholder", OrderSummaryPlaceholderProducer())
    registry.register("ConfirmationPlaceholder", ConfirmationPlaceholderProducer())

    # Overlay root
    registry.register("ModalContainer/V1", ModalProducer())

    return registry
