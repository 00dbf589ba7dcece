import unittest

from movieList.metadata.core.models import (
    Bookmark,
    MovieSummary,
    SeriesSummary,
    TrailerResult,
    image_url,
    results_of,
)
from tests.helpers import movie_json, series_json


class MovieSummaryTests(unittest.TestCase):
    def test_maps_snake_case_fields(self):
        movie = MovieSummary.from_json(movie_json(mid=438631, title="Dune"))

        self.assertEqual(movie.id, 438631)
        self.assertEqual(movie.title, "Dune")
        self.assertEqual(movie.poster_path, "/poster438631.jpg")
        self.assertEqual(movie.backdrop_path, "/backdrop438631.jpg")
        self.assertEqual(movie.vote_average, 7.5)
        self.assertEqual(movie.release_date, "2021-10-22")

    def test_optional_paths_may_be_missing_or_null(self):
        data = movie_json(poster_path=None)
        del data["backdrop_path"]

        movie = MovieSummary.from_json(data)

        self.assertIsNone(movie.poster_path)
        self.assertIsNone(movie.backdrop_path)
        self.assertIsNone(movie.poster_url)

    def test_integer_vote_average_becomes_float(self):
        movie = MovieSummary.from_json(movie_json(vote_average=8))
        self.assertIsInstance(movie.vote_average, float)

    def test_missing_required_field_raises(self):
        for field in ("id", "title", "overview", "vote_average", "release_date"):
            with self.subTest(field=field):
                data = movie_json()
                del data[field]
                with self.assertRaises(KeyError):
                    MovieSummary.from_json(data)

    def test_wrong_types_raise(self):
        for field, value in (("id", "1"), ("id", True), ("vote_average", "7.5"),
                             ("title", None), ("poster_path", 12)):
            with self.subTest(field=field, value=value):
                with self.assertRaises(TypeError):
                    MovieSummary.from_json(movie_json(**{field: value}))

    def test_records_are_immutable(self):
        movie = MovieSummary.from_json(movie_json())
        with self.assertRaises(AttributeError):
            movie.title = "Other"

    def test_image_urls(self):
        movie = MovieSummary.from_json(movie_json(mid=7))
        self.assertEqual(movie.poster_url, "https://image.tmdb.org/t/p/w500/poster7.jpg")
        self.assertIsNone(image_url(""))


class SeriesSummaryTests(unittest.TestCase):
    def test_uses_name_and_first_air_date(self):
        show = SeriesSummary.from_json(series_json(name="Severance"))

        self.assertEqual(show.name, "Severance")
        self.assertEqual(show.display_title, "Severance")
        self.assertEqual(show.first_air_date, "2022-02-18")

    def test_movie_shaped_item_is_rejected(self):
        with self.assertRaises(KeyError):
            SeriesSummary.from_json(movie_json())


class ResultsEnvelopeTests(unittest.TestCase):
    def test_keeps_upstream_order_and_drops_pagination(self):
        payload = {
            "page": 1,
            "total_pages": 40,
            "results": [movie_json(3, "C"), movie_json(1, "A"), movie_json(2, "B")],
        }

        page = results_of(MovieSummary.from_json)(payload)

        self.assertEqual([m.id for m in page], [3, 1, 2])

    def test_one_bad_item_fails_the_whole_page(self):
        bad = movie_json(2, "B")
        del bad["vote_average"]
        payload = {"results": [movie_json(1, "A"), bad, movie_json(3, "C")]}

        with self.assertRaises(KeyError):
            results_of(MovieSummary.from_json)(payload)

    def test_results_must_be_a_list(self):
        with self.assertRaises(TypeError):
            results_of(MovieSummary.from_json)({"results": {"id": 1}})


class TrailerResultTests(unittest.TestCase):
    def test_first_item_video_id(self):
        payload = {"items": [{"id": {"kind": "youtube#video", "videoId": "n9xhJrPXop4"}},
                             {"id": {"videoId": "other"}}]}

        result = TrailerResult.from_search(payload)

        self.assertEqual(result.video_id, "n9xhJrPXop4")
        self.assertTrue(result.found)
        self.assertEqual(result.watch_url, "https://www.youtube.com/watch?v=n9xhJrPXop4")
        self.assertEqual(result.embed_url, "https://www.youtube.com/embed/n9xhJrPXop4?playsinline=1")

    def test_no_items_means_no_trailer(self):
        result = TrailerResult.from_search({"items": []})

        self.assertIsNone(result.video_id)
        self.assertFalse(result.found)
        self.assertIsNone(result.watch_url)

    def test_item_without_video_id(self):
        result = TrailerResult.from_search({"items": [{"id": {"kind": "youtube#channel"}}]})
        self.assertIsNone(result.video_id)

    def test_missing_items_key_raises(self):
        with self.assertRaises(KeyError):
            TrailerResult.from_search({"error": {"code": 403}})


class BookmarkTests(unittest.TestCase):
    def test_from_movie_prefers_backdrop(self):
        movie = MovieSummary.from_json(movie_json(mid=5, title="Arrival"))

        bookmark = Bookmark.from_summary(movie)

        self.assertEqual(bookmark, Bookmark("Arrival", "Arrival overview", "/backdrop5.jpg"))

    def test_from_series_falls_back_to_empty_image(self):
        show = SeriesSummary.from_json(series_json(backdrop_path=None))
        self.assertEqual(Bookmark.from_summary(show).image_path, "")

    def test_record_keys(self):
        bookmark = Bookmark("Dune", "Spice.", "/d.jpg")
        self.assertEqual(bookmark.to_record(), {"title": "Dune", "overview": "Spice.", "imagePath": "/d.jpg"})
        self.assertEqual(Bookmark.from_record(bookmark.to_record()), bookmark)


if __name__ == "__main__":
    unittest.main()
