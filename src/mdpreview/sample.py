"""Default document shown when the preview opens.

Exercises every construct the parser understands, plus a quote line that
shows quotes are treated as plain paragraphs.
"""

SAMPLE_DOCUMENT = """

# Level one header (h1)
## Level two header (h2)
### Level three header (h3)
#### Level four header (h4)
##### Level five header (h5)
###### Level six header (h6)

### Links
[GitHub](https://github.com/)

### Code blocks
```javascript
function greet(name) {
  return `Hello, ${name}!`;
}
```
**bold text**  or  __bold text__

_italic text _ or *italic text*

~~strikethrough text~~

&underlined text&

> quoted text
> can span several lines

||spoiler text|| (hover to reveal)


### Images
![random picture](https://picsum.photos/200/100)

## Video
![video](https://sample-videos.com/video321/mp4/720/big_buck_bunny_720p_2mb.mp4) "Big Buck Bunny"
"""
