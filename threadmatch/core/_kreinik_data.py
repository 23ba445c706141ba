"""Bundled Kreinik metallic thread catalog: (code, name, (r, g, b), type)."""

KREINIK_THREADS: list[tuple[str, str, tuple[int, int, int], str]] = [
    ('002', 'Gold', (255, 215, 0), 'braid'),
    ('002C', 'Gold Cord', (255, 215, 0), 'cord'),
    ('002F', 'Gold Fine', (255, 215, 0), 'blending-filament'),
    ('002HL', 'Gold Hi Lustre', (255, 220, 50), 'braid'),
    ('002J', 'Japan Gold', (255, 210, 80), 'japan'),
    ('002L', 'Gold Light', (255, 230, 100), 'braid'),
    ('002P', 'Gold Pearl', (255, 225, 130), 'braid'),
    ('002V', 'Vintage Gold', (200, 160, 60), 'braid'),
    ('003HL', 'Red Gold Hi Lustre', (255, 180, 50), 'braid'),
    ('021', 'Copper', (184, 115, 51), 'braid'),
    ('021C', 'Copper Cord', (184, 115, 51), 'cord'),
    ('021F', 'Copper Filament', (184, 115, 51), 'blending-filament'),
    ('021HL', 'Copper Hi Lustre', (205, 135, 75), 'braid'),
    ('202HL', 'Aztec Gold', (218, 165, 32), 'braid'),
    ('205C', 'Antique Gold', (180, 145, 75), 'cord'),
    ('205HL', 'Antique Gold Hi Lustre', (195, 160, 85), 'braid'),
    ('221', 'Antique Gold Dark', (155, 120, 50), 'braid'),
    ('3212', 'Citron', (210, 200, 70), 'braid'),
    ('001', 'Silver', (192, 192, 192), 'braid'),
    ('001C', 'Silver Cord', (192, 192, 192), 'cord'),
    ('001F', 'Silver Fine', (192, 192, 192), 'blending-filament'),
    ('001HL', 'Silver Hi Lustre', (210, 210, 215), 'braid'),
    ('001J', 'Japan Silver', (195, 195, 200), 'japan'),
    ('001L', 'Silver Light', (220, 220, 225), 'braid'),
    ('001P', 'Silver Pearl', (230, 230, 235), 'braid'),
    ('001V', 'Vintage Silver', (160, 160, 165), 'braid'),
    ('011HL', 'Nickel Hi Lustre', (175, 175, 180), 'braid'),
    ('012', 'Pewter', (130, 130, 135), 'braid'),
    ('012HL', 'Pewter Hi Lustre', (145, 145, 150), 'braid'),
    ('032', 'Pearl', (255, 255, 255), 'braid'),
    ('032C', 'Pearl Cord', (255, 255, 255), 'cord'),
    ('032F', 'Pearl Fine', (255, 255, 255), 'blending-filament'),
    ('032HL', 'Pearl Hi Lustre', (255, 255, 255), 'braid'),
    ('100', 'White', (255, 255, 255), 'braid'),
    ('100HL', 'White Hi Lustre', (255, 255, 255), 'braid'),
    ('005', 'Black', (0, 0, 0), 'braid'),
    ('005C', 'Black Cord', (0, 0, 0), 'cord'),
    ('005F', 'Black Fine', (0, 0, 0), 'blending-filament'),
    ('005HL', 'Black Hi Lustre', (25, 25, 25), 'braid'),
    ('003', 'Red', (255, 0, 0), 'braid'),
    ('003F', 'Red Fine', (255, 0, 0), 'blending-filament'),
    ('003L', 'Red Light', (255, 80, 80), 'braid'),
    ('003HL', 'Red Hi Lustre', (255, 40, 40), 'braid'),
    ('031', 'Flame', (255, 100, 30), 'braid'),
    ('031HL', 'Flame Hi Lustre', (255, 115, 45), 'braid'),
    ('034', 'Fuschia', (255, 0, 128), 'braid'),
    ('034HL', 'Fuschia Hi Lustre', (255, 30, 140), 'braid'),
    ('042', 'Confetti Red', (220, 50, 50), 'braid'),
    ('203HL', 'Flame Red', (255, 60, 20), 'braid'),
    ('332', 'Christmas Red', (200, 0, 0), 'braid'),
    ('332F', 'Christmas Red Fine', (200, 0, 0), 'blending-filament'),
    ('333', 'Ruby', (155, 25, 50), 'braid'),
    ('334', 'Cranberry', (130, 30, 50), 'braid'),
    ('007', 'Pink', (255, 192, 203), 'braid'),
    ('007HL', 'Pink Hi Lustre', (255, 200, 210), 'braid'),
    ('024', 'Fuchsia', (255, 50, 150), 'braid'),
    ('024HL', 'Fuchsia Hi Lustre', (255, 70, 160), 'braid'),
    ('194', 'Pale Pink', (255, 220, 225), 'braid'),
    ('9194', 'Star Pink', (255, 180, 200), 'braid'),
    ('006', 'Orange', (255, 165, 0), 'braid'),
    ('006HL', 'Orange Hi Lustre', (255, 175, 30), 'braid'),
    ('052', 'Grapefruit', (255, 130, 100), 'braid'),
    ('321', 'Tangerine', (255, 145, 50), 'braid'),
    ('326', 'Burnt Orange', (205, 95, 20), 'braid'),
    ('091', 'Star Yellow', (255, 255, 100), 'braid'),
    ('091HL', 'Star Yellow Hi Lustre', (255, 255, 120), 'braid'),
    ('311', 'Sunlight', (255, 250, 150), 'braid'),
    ('312', 'Sunflower', (255, 240, 80), 'braid'),
    ('2122', 'Yellow Gold', (255, 220, 50), 'braid'),
    ('008', 'Green', (0, 128, 0), 'braid'),
    ('008HL', 'Green Hi Lustre', (30, 145, 30), 'braid'),
    ('009', 'Emerald', (0, 155, 80), 'braid'),
    ('009HL', 'Emerald Hi Lustre', (30, 170, 95), 'braid'),
    ('015', 'Chartreuse', (180, 220, 50), 'braid'),
    ('015HL', 'Chartreuse Hi Lustre', (195, 230, 70), 'braid'),
    ('051', 'Peacock', (50, 130, 130), 'braid'),
    ('051HL', 'Peacock Hi Lustre', (70, 145, 145), 'braid'),
    ('053', 'Willow', (150, 190, 100), 'braid'),
    ('322', 'Grass Green', (80, 160, 60), 'braid'),
    ('334V', 'Vintage Emerald', (40, 120, 70), 'braid'),
    ('3215', 'Leaf Green', (100, 150, 70), 'braid'),
    ('3216', 'Pine', (45, 95, 55), 'braid'),
    ('5982', 'Forest', (30, 80, 45), 'braid'),
    ('006B', 'Blue', (0, 100, 200), 'braid'),
    ('014', 'Sky Blue', (135, 206, 235), 'braid'),
    ('014HL', 'Sky Blue Hi Lustre', (150, 215, 240), 'braid'),
    ('022', 'Royal Blue', (65, 105, 225), 'braid'),
    ('022HL', 'Royal Blue Hi Lustre', (80, 120, 235), 'braid'),
    ('033', 'Confetti Blue', (100, 150, 220), 'braid'),
    ('051B', 'Sapphire', (30, 70, 160), 'braid'),
    ('051BHL', 'Sapphire Hi Lustre', (50, 90, 175), 'braid'),
    ('052B', 'Colonial Blue', (80, 120, 180), 'braid'),
    ('085', 'Peacock Blue', (0, 100, 140), 'braid'),
    ('086', 'Midnight', (25, 40, 95), 'braid'),
    ('095', 'Starburst', (100, 165, 215), 'braid'),
    ('3514', 'Blue Ice', (180, 210, 240), 'braid'),
    ('3515', 'Wedgewood', (100, 140, 190), 'braid'),
    ('3545', 'Navy', (20, 35, 80), 'braid'),
    ('012P', 'Purple', (128, 0, 128), 'braid'),
    ('012PHL', 'Purple Hi Lustre', (145, 30, 145), 'braid'),
    ('016', 'Amethyst', (155, 90, 180), 'braid'),
    ('016HL', 'Amethyst Hi Lustre', (170, 105, 195), 'braid'),
    ('023', 'Lilac', (200, 160, 210), 'braid'),
    ('023HL', 'Lilac Hi Lustre', (210, 175, 220), 'braid'),
    ('026', 'Violet', (130, 80, 160), 'braid'),
    ('026HL', 'Violet Hi Lustre', (145, 95, 175), 'braid'),
    ('026L', 'Violet Light', (175, 130, 195), 'braid'),
    ('3225', 'Orchid', (185, 110, 175), 'braid'),
    ('3226', 'Grape', (100, 50, 100), 'braid'),
    ('024B', 'Brown', (139, 90, 43), 'braid'),
    ('024BHL', 'Brown Hi Lustre', (155, 105, 60), 'braid'),
    ('052V', 'Vintage Bronze', (135, 95, 55), 'braid'),
    ('022B', 'Chestnut', (150, 85, 50), 'braid'),
    ('222', 'Bronze', (165, 120, 70), 'braid'),
    ('222HL', 'Bronze Hi Lustre', (180, 135, 85), 'braid'),
    ('223', 'Antique Bronze', (140, 100, 60), 'braid'),
    ('231', 'Autumn Brown', (125, 80, 45), 'braid'),
    ('232', 'Chocolate', (90, 50, 30), 'braid'),
    ('5125', 'Caramel', (175, 130, 80), 'braid'),
    ('5215', 'Toffee', (155, 110, 65), 'braid'),
    ('052G', 'Glow White', (250, 255, 250), 'braid'),
    ('054F', 'Glow Green', (180, 255, 180), 'braid'),
    ('056F', 'Glow Orange', (255, 200, 150), 'braid'),
    ('048', 'Confetti Rainbow', (255, 128, 128), 'braid'),
    ('091V', 'Vintage Variegated', (200, 175, 130), 'braid'),
]
