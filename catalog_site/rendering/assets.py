"""
Static assets written next to the generated pages.

catalog.js mirrors the Python behaviour in the browser: the listing filter
(catalog.store.filter_products) and the gallery slider
(rendering.slider.GallerySlider).
"""

from ..common.constants import SWIPE_THRESHOLD

CATALOG_JS = """\
(function () {
    'use strict';

    // Listing filter: search in name/brand/presentation, exact category and brand
    function applyFilters() {
        var search = document.getElementById('searchInput');
        var category = document.getElementById('categoryFilter');
        var brand = document.getElementById('brandFilter');
        if (!search || !category || !brand) return;

        var term = search.value.toLowerCase();
        var visible = 0;
        document.querySelectorAll('.product-card').forEach(function (card) {
            var d = card.dataset;
            var matchesSearch = !term ||
                d.name.toLowerCase().indexOf(term) !== -1 ||
                d.brand.toLowerCase().indexOf(term) !== -1 ||
                d.presentation.toLowerCase().indexOf(term) !== -1;
            var show = matchesSearch &&
                (!category.value || d.category === category.value) &&
                (!brand.value || d.brand === brand.value);
            card.hidden = !show;
            if (show) visible += 1;
        });
        var empty = document.getElementById('noResults');
        if (empty) empty.hidden = visible !== 0;
    }

    // Slider: clamped next/prev, direct jump, swipe past the threshold
    function setupSlider(container) {
        var dots = container.querySelectorAll('.slider-dot');
        var main = container.querySelector('.main-image');
        var prev = container.querySelector('.slider-prev');
        var next = container.querySelector('.slider-next');
        var index = 0;
        var startX = null;

        function goTo(i) {
            if (i < 0 || i >= dots.length) return;
            index = i;
            main.src = dots[i].dataset.src;
            dots.forEach(function (dot, n) { dot.classList.toggle('active', n === i); });
            prev.disabled = i === 0;
            next.disabled = i === dots.length - 1;
        }

        prev.addEventListener('click', function () { goTo(index - 1); });
        next.addEventListener('click', function () { goTo(index + 1); });
        dots.forEach(function (dot, n) { dot.addEventListener('click', function () { goTo(n); }); });
        container.addEventListener('touchstart', function (e) { startX = e.touches[0].clientX; });
        container.addEventListener('touchend', function (e) {
            if (startX === null) return;
            var dx = e.changedTouches[0].clientX - startX;
            startX = null;
            if (Math.abs(dx) > %(threshold)d) goTo(dx < 0 ? index + 1 : index - 1);
        });
    }

    // Detail thumbnails: exactly one active, synced with the main image
    function setupThumbnails() {
        var main = document.getElementById('mainImage');
        var thumbs = document.querySelectorAll('.thumbnail');
        thumbs.forEach(function (thumb) {
            thumb.addEventListener('click', function () {
                main.src = thumb.src;
                thumbs.forEach(function (t) { t.classList.remove('active'); });
                thumb.classList.add('active');
            });
        });
    }

    document.addEventListener('DOMContentLoaded', function () {
        var form = document.getElementById('filters');
        if (form && !form.dataset.server) {
            form.addEventListener('submit', function (e) { e.preventDefault(); applyFilters(); });
            document.getElementById('searchInput').addEventListener('input', applyFilters);
            document.getElementById('categoryFilter').addEventListener('change', applyFilters);
            document.getElementById('brandFilter').addEventListener('change', applyFilters);
        }
        document.querySelectorAll('.image-slider').forEach(setupSlider);
        setupThumbnails();
    });
})();
""" % {"threshold": SWIPE_THRESHOLD}

CATALOG_CSS = """\
body { font-family: system-ui, sans-serif; margin: 0; background: #fafafa; color: #222; }
header.site-header { padding: 1rem 2rem; background: #fff; border-bottom: 1px solid #eee; }
header.site-header a { color: inherit; text-decoration: none; }
main { padding: 1rem 2rem; }
.filters { display: flex; gap: .5rem; flex-wrap: wrap; margin-bottom: 1rem; }
.product-grid { display: grid; gap: 1rem; grid-template-columns: repeat(auto-fill, minmax(220px, 1fr)); }
.product-card { background: #fff; border-radius: 8px; overflow: hidden; box-shadow: 0 1px 3px rgba(0,0,0,.1); }
.product-card[hidden] { display: none; }
.product-image-container { position: relative; aspect-ratio: 1; background: #f3f3f3; }
.product-image, .main-product-image { width: 100%; height: 100%; object-fit: contain; }
.slider-arrow { position: absolute; top: 50%; transform: translateY(-50%); border: 0; background: rgba(255,255,255,.8); cursor: pointer; }
.slider-prev { left: .25rem; } .slider-next { right: .25rem; }
.slider-arrow[disabled] { opacity: .3; cursor: default; }
.slider-dots { position: absolute; bottom: .5rem; width: 100%; text-align: center; }
.slider-dot { width: 8px; height: 8px; border-radius: 50%; border: 0; margin: 0 2px; background: #bbb; padding: 0; }
.slider-dot.active { background: #333; }
.product-info { padding: .75rem; }
.product-category, .detail-category, .detail-brand { font-size: .8rem; background: #eef; padding: .1rem .4rem; border-radius: 4px; }
.product-price, .detail-price { font-weight: bold; margin: .3rem 0; }
.product-detail { display: grid; gap: 2rem; grid-template-columns: repeat(auto-fit, minmax(300px, 1fr)); }
.thumbnail-gallery { display: flex; gap: .5rem; margin-top: .5rem; }
.thumbnail { width: 64px; height: 64px; object-fit: cover; cursor: pointer; opacity: .6; }
.thumbnail.active { opacity: 1; outline: 2px solid #333; }
.whatsapp-btn { display: inline-block; background: #25d366; color: #fff; padding: .6rem 1rem; border-radius: 6px; text-decoration: none; }
.error, .no-results { text-align: center; padding: 2rem; }
"""
