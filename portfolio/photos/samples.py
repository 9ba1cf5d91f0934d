"""
Built-in sample photo set, the last tier of photo resolution.
"""
from typing import List

from .models import PhotoMetadata, ResolvedPhoto


def get_sample_photos() -> List[ResolvedPhoto]:
    """High-quality bird photography used when no live source works."""
    return [
        ResolvedPhoto(
            id="fallback-1",
            base_url="https://images.unsplash.com/photo-1444464666168-49d633b86797",
            filename="cardinal-winter.jpg",
            title="Northern Cardinal in Winter",
            description=(
                "A vibrant male cardinal perched on a snow-covered branch during the "
                "early morning hours."
            ),
            metadata=PhotoMetadata(
                camera="Canon EOS R5",
                lens="400mm f/5.6",
                settings="f/5.6, 1/500s, ISO 800",
                location="Central Park, New York",
                date="2024-01-15",
                tags=["cardinal", "winter", "snow"],
            ),
        ),
        ResolvedPhoto(
            id="fallback-2",
            base_url="https://images.unsplash.com/photo-1551731409-43eb3e517a1a",
            filename="hummingbird-flight.jpg",
            title="Ruby-throated Hummingbird",
            description=(
                "Captured mid-flight as this tiny jewel hovers near a feeder, wings "
                "beating at incredible speed."
            ),
            metadata=PhotoMetadata(
                camera="Nikon D850",
                lens="600mm f/4",
                settings="f/4.0, 1/2000s, ISO 1600",
                location="Backyard Garden, Connecticut",
                date="2024-02-20",
                tags=["hummingbird", "flight", "action"],
            ),
        ),
        ResolvedPhoto(
            id="fallback-3",
            base_url="https://images.unsplash.com/photo-1518709268805-4e9042af2176",
            filename="eagle-portrait.jpg",
            title="Bald Eagle Portrait",
            description=(
                "A majestic bald eagle showcasing the intense gaze and detailed feather "
                "patterns."
            ),
            metadata=PhotoMetadata(
                camera="Sony A7R IV",
                lens="800mm f/6.3",
                settings="f/6.3, 1/1000s, ISO 400",
                location="Alaska Wildlife Reserve",
                date="2024-03-10",
                tags=["eagle", "portrait", "majestic"],
            ),
        ),
        ResolvedPhoto(
            id="fallback-4",
            base_url="https://images.unsplash.com/photo-1559827260-dc66d52bef19",
            filename="owl-closeup.jpg",
            title="Great Horned Owl",
            description=(
                "An intimate portrait of a great horned owl, highlighting the piercing "
                "yellow eyes."
            ),
            metadata=PhotoMetadata(
                camera="Canon EOS R6",
                lens="500mm f/4.5",
                settings="f/4.5, 1/800s, ISO 1000",
                location="Pacific Northwest Forest",
                date="2024-04-05",
                tags=["owl", "eyes", "nocturnal"],
            ),
        ),
        ResolvedPhoto(
            id="fallback-5",
            base_url="https://images.unsplash.com/photo-1583212292454-1fe6229603b7",
            filename="kingfisher-dive.jpg",
            title="Kingfisher Diving",
            description=(
                "Perfect timing captures a belted kingfisher just as it dives toward "
                "the water."
            ),
            metadata=PhotoMetadata(
                camera="Nikon Z9",
                lens="600mm f/5.6",
                settings="f/5.6, 1/1600s, ISO 640",
                location="Lake Tahoe, California",
                date="2024-05-12",
                tags=["kingfisher", "diving", "action"],
            ),
        ),
        ResolvedPhoto(
            id="fallback-6",
            base_url="https://images.unsplash.com/photo-1574781330855-d0db2706b3d0",
            filename="peacock-display.jpg",
            title="Peacock Display",
            description=(
                "A stunning male peacock in full display, showing off the iridescent "
                "eye-spots."
            ),
            metadata=PhotoMetadata(
                camera="Sony A1",
                lens="300mm f/2.8",
                settings="f/2.8, 1/250s, ISO 200",
                location="Botanical Gardens, San Diego",
                date="2024-06-18",
                tags=["peacock", "display", "colorful"],
            ),
        ),
    ]
