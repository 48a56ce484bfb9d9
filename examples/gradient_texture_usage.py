"""Gradient Texture usage examples.

Run directly with:
    python examples/gradient_texture_usage.py
"""
from gradient_texture import (
    BlendCurve,
    ColorRGBA,
    ContainerFormat,
    FormatParameters,
    GradientField,
    GradientTexture,
)


def build_sky() -> GradientTexture:
    # Horizon band at the bottom, deep blue zenith at the top
    zenith = GradientField.from_colors([(0.05, 0.10, 0.45), (0.10, 0.25, 0.70)])
    horizon = GradientField(
        color_keys=[(0.0, ColorRGBA((1.0, 0.55, 0.25))), (0.5, (1.0, 0.85, 0.6)), (1.0, (0.9, 0.5, 0.3))],
        alpha_keys=[(0.0, 1.0)],
    )
    return GradientTexture(
        "sky",
        settings=FormatParameters(resolution=(128, 64), high_dynamic_range=False),
        top=zenith,
        bottom=horizon,
        curve=BlendCurve.ease_in_out(),
    )


def demonstrate_reconcile(texture: GradientTexture) -> None:
    print("first update:", texture.update())
    print("same settings:", texture.update())
    print("mipmaps on:", texture.set_settings(generate_mipmaps=True))
    print("raster:", texture.get_texture())


def demonstrate_export(texture: GradientTexture) -> None:
    for container in (ContainerFormat.PNG, ContainerFormat.TGA):
        image = texture.export_image(container)
        filename = f"{texture.name}.{container.value}"
        with open(filename, "wb") as f:
            f.write(image.data)
        print(f"saved {filename} ({len(image.data)} bytes, srgb={image.srgb}, mipmaps={image.mipmaps_enabled})")


if __name__ == "__main__":
    sky = build_sky()
    demonstrate_reconcile(sky)
    demonstrate_export(sky)
